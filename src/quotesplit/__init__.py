"""Split command lines into arguments, honoring single and double quotes."""

from quotesplit.tokenizer import State, Tokenizer, UnterminatedQuoteError, parse, split

__version__ = "0.1.0"

__all__ = ["State", "Tokenizer", "UnterminatedQuoteError", "parse", "split", "__version__"]
