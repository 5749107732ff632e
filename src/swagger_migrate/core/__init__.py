"""
Core migration engine: classification, value transformation, template synthesis,
splicing, traversal and orchestration.
"""
