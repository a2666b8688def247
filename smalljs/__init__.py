"""
A tree-walking interpreter for a small JavaScript-flavored scripting language.
The parser lives elsewhere; this package takes the tree it builds and runs it.
"""
