"""
MeshCore contact cleaner package
Classifies exported MeshCore contacts as keep/remove candidates
"""
