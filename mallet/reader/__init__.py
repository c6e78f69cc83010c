from mallet.reader.lexer import Token, lex, tokenize
from mallet.reader.parser import TokenStream, read_str, read_all

__all__ = ["Token", "lex", "tokenize", "TokenStream", "read_str", "read_all"]
