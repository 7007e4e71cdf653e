# src/extraction/reader.py — v1
"""Reader for the line-oriented network text format.

Layout:
    u0 2018 #python #data        one line per user, index order
    u1 2019 #data
    0 1                          N adjacency rows of 0/1
    1 0
    0.5 1                        ths thc

Blank lines are ignored. Adjacency rows may be written with or without
spaces between the digits.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from hubtags.core.models import SocialNetwork, Thresholds, User

logger = logging.getLogger(__name__)

_USER_LINE = re.compile(r"^u(\d+)\b")


class InputFormatError(ValueError):
    """Raised when the input text does not follow the network format."""

    def __init__(self, message: str, line_no: int | None = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


@dataclass(frozen=True)
class ParsedInput:
    """Network and thresholds read from one input document."""

    network: SocialNetwork
    thresholds: Thresholds


def read_network(path: Path) -> ParsedInput:
    """Read and parse an input file."""
    logger.info("Reading network from %s", path)
    return parse_network(Path(path).read_text(encoding="utf-8"))


def parse_network(text: str) -> ParsedInput:
    """Parse the network text format.

    Raises:
        InputFormatError: On any structural or value error.
    """
    lines = [
        (no, line.strip())
        for no, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    pos = 0

    users: list[User] = []
    while pos < len(lines) and _USER_LINE.match(lines[pos][1]):
        line_no, line = lines[pos]
        users.append(_parse_user(line, line_no, expected_id=len(users)))
        pos += 1

    n = len(users)
    adjacency: list[tuple[bool, ...]] = []
    for _ in range(n):
        if pos >= len(lines):
            raise InputFormatError(
                f"expected {n} adjacency rows, found {len(adjacency)}"
            )
        line_no, line = lines[pos]
        adjacency.append(_parse_row(line, line_no, n))
        pos += 1

    if pos >= len(lines):
        raise InputFormatError("missing threshold line '<ths> <thc>'")
    line_no, line = lines[pos]
    thresholds = _parse_thresholds(line, line_no)
    pos += 1

    if pos < len(lines):
        extra_no, _ = lines[pos]
        raise InputFormatError("unexpected content after threshold line", extra_no)

    network = SocialNetwork(users=tuple(users), adjacency=tuple(adjacency))
    logger.debug(
        "Parsed %d users, ths=%s, thc=%d", n, thresholds.ths, thresholds.thc
    )
    return ParsedInput(network=network, thresholds=thresholds)


def _parse_user(line: str, line_no: int, expected_id: int) -> User:
    tokens = line.split()
    user_id = int(tokens[0][1:]) if tokens[0][1:].isdigit() else -1
    if user_id != expected_id:
        raise InputFormatError(
            f"expected user u{expected_id}, got {tokens[0]!r}", line_no
        )
    if len(tokens) < 2:
        raise InputFormatError("missing year joined", line_no)
    try:
        year_joined = int(tokens[1])
    except ValueError:
        raise InputFormatError(f"invalid year {tokens[1]!r}", line_no) from None

    tags: list[str] = []
    for token in tokens[2:]:
        if not token.startswith("#") or len(token) == 1:
            raise InputFormatError(f"invalid hashtag {token!r}", line_no)
        tags.append(token[1:])

    return User(user_id=user_id, year_joined=year_joined, tags=tuple(tags))


def _parse_row(line: str, line_no: int, n: int) -> tuple[bool, ...]:
    digits = "".join(line.split())
    if not digits or set(digits) - {"0", "1"}:
        raise InputFormatError(f"adjacency row must contain only 0/1: {line!r}", line_no)
    if len(digits) != n:
        raise InputFormatError(
            f"adjacency row has {len(digits)} entries, expected {n}", line_no
        )
    return tuple(c == "1" for c in digits)


def _parse_thresholds(line: str, line_no: int) -> Thresholds:
    tokens = line.split()
    if len(tokens) != 2:
        raise InputFormatError(f"expected '<ths> <thc>', got {line!r}", line_no)
    try:
        return Thresholds(ths=float(tokens[0]), thc=int(tokens[1]))
    except (ValueError, ValidationError) as exc:
        raise InputFormatError(f"invalid thresholds {line!r}: {exc}", line_no) from exc
