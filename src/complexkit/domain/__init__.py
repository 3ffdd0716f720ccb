"""
Domain models and value objects.

Нормализатор входа, токенизатор текстовой записи и ComplexValue.
"""

from complexkit.domain.complex_value import E, I, ONE, PI, ZERO, ComplexValue, make
from complexkit.domain.inputs import (
    CartesianInput,
    EmptyInput,
    NormalizerInput,
    PairInput,
    PolarInput,
    ScalarInput,
    TextInput,
    classify,
)
from complexkit.domain.normalizer import normalize, validate_pair
from complexkit.domain.tokenizer import Token, parse_text, tokenize

__all__ = [
    # ComplexValue
    "ComplexValue",
    "make",
    "ZERO",
    "ONE",
    "I",
    "PI",
    "E",
    # Input variants
    "NormalizerInput",
    "EmptyInput",
    "PairInput",
    "CartesianInput",
    "PolarInput",
    "ScalarInput",
    "TextInput",
    "classify",
    # Normalizer
    "normalize",
    "validate_pair",
    # Tokenizer
    "Token",
    "tokenize",
    "parse_text",
]
