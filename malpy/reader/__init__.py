from malpy.reader.parser import lex, read, TokenStream

__all__ = ["lex", "read", "TokenStream"]
