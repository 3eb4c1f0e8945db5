"""
AST backends - the C# AST of a generated editor and its serializer.
"""
