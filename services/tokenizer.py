# services/tokenizer.py

from typing import List, Sequence

from core.errors import TooManyArguments

# Above this many raw arguments the input is rejected before tokenizing
MAX_RAW_ARGUMENTS = 7

# Ignored so users can write "from jun 1 to aug 1"
JOINING_WORD = "to"


def check_raw_argument_count(raw_args: Sequence[str]) -> None:
    if len(raw_args) > MAX_RAW_ARGUMENTS:
        raise TooManyArguments(len(raw_args), MAX_RAW_ARGUMENTS)


def tokenize(raw_args: Sequence[str]) -> List[str]:
    """
    Split raw arguments on whitespace, lowercase them and drop "to".

    A single shell argument such as "june 16" yields two tokens.
    """
    tokens: List[str] = []
    for arg in raw_args:
        for tok in arg.lower().split():
            if tok == JOINING_WORD:
                continue
            tokens.append(tok)
    return tokens
