"""
Exception types raised by codonkit.

Every error here is a data-integrity problem: a character outside the
accepted alphabet, an unknown amino acid code, or a residue missing from a
substitution matrix. They are raised immediately and never defaulted.
"""


class CodonkitError(Exception):
    """Base class for all codonkit errors."""


class InvalidBaseError(CodonkitError, ValueError):
    """A character is not an accepted nucleotide under the given mode."""

    def __init__(self, base: str, strict: bool = True, context: str = ""):
        self.base = base
        self.strict = strict
        mode = "strict" if strict else "lenient"
        where = f" in {context}" if context else ""
        super().__init__(f"Invalid base {base!r}{where} ({mode} mode)")


class InvalidAminoAcidError(CodonkitError, ValueError):
    """A letter or trigram is outside the 22 amino acid codes."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown amino acid code {code!r}")


class ResidueNotFoundError(CodonkitError, KeyError):
    """A residue is absent from a substitution matrix alphabet."""

    def __init__(self, residue: str, alphabet: str = ""):
        self.residue = residue
        self.alphabet = alphabet
        super().__init__(f"Residue {residue!r} not in matrix alphabet {alphabet!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class MatrixFormatError(CodonkitError, ValueError):
    """A substitution matrix table could not be parsed."""


class DuplicateRecordError(CodonkitError, ValueError):
    """Two FASTA records share the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate FASTA record name {name!r}")
