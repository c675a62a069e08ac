"""Quote-aware argument splitting state machine."""

from quotesplit.tokenizer.states import State
from quotesplit.tokenizer.tokenizer import Tokenizer, UnterminatedQuoteError, parse, split

__all__ = ["State", "Tokenizer", "UnterminatedQuoteError", "parse", "split"]
