"""
dog: dump the relevant source of a project as one block of text.
"""
