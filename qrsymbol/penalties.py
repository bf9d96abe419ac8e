# -*- coding: utf-8 -*-
"""
QR Code Mask Penalty Evaluation Module

Scores a masked symbol with the penalty rules of ISO/IEC 18004:2015
section 7.8.3. Rules N1 (runs), N2 (2x2 blocks) and N4 (dark module ratio)
are scored; the finder-like pattern rule N3 is not part of the score.

Functions:
    penalty_N1: Evaluate adjacent modules in runs (Rule N1)
    penalty_N2: Evaluate 2x2 blocks of same color (Rule N2)
    penalty_N4: Evaluate dark/light module ratio (Rule N4)
    compute_mask_penalty: Calculate total penalty score
"""

from typing import Iterable, List, Sequence


def _run_penalty(line: Sequence[bool]) -> int:
    score = 0
    run = 1
    for i in range(1, len(line)):
        if line[i] == line[i - 1]:
            run += 1
        else:
            if run >= 5:
                score += 3 + (run - 5)
            run = 1
    if run >= 5:
        score += 3 + (run - 5)
    return score


def penalty_N1(rows: List[List[bool]]) -> int:
    """
    Calculate penalty for adjacent modules in runs (Rule N1).

    Every horizontal or vertical run of 5 or more modules of the same color
    scores 3 + (run_length - 5), i.e. run_length - 2.

    Args:
        rows (List[List[bool]]): QR matrix (True=dark, False=light)

    Returns:
        int: Penalty score for rule N1

    Example:
        >>> penalty_N1([[True, True, True, True, True, False]])
        3
    """
    score = sum(_run_penalty(row) for row in rows)
    if rows:
        for c in range(len(rows[0])):
            score += _run_penalty([row[c] for row in rows])
    return score


def penalty_N2(rows: List[List[bool]]) -> int:
    """
    Calculate penalty for 2x2 blocks of same color (Rule N2).

    Each (possibly overlapping) 2x2 block whose four modules share a color
    adds 3 points.

    Example:
        >>> penalty_N2([[True, True], [True, True]])
        3
    """
    score = 0
    for r in range(len(rows) - 1):
        for c in range(len(rows[r]) - 1):
            value = rows[r][c]
            if (rows[r][c + 1] == value and
                    rows[r + 1][c] == value and
                    rows[r + 1][c + 1] == value):
                score += 3
    return score


def penalty_N4(rows: List[List[bool]]) -> int:
    """
    Calculate penalty for dark/light module ratio (Rule N4).

    10 * floor(abs(dark_percentage - 50) / 5)

    Example:
        >>> penalty_N4([[True, True, True, False]])  # 75% dark
        50
    """
    total = sum(len(row) for row in rows)
    if not total:
        return 0
    dark = sum(1 for row in rows for v in row if v)
    ratio = dark * 100.0 / total
    return int(abs(ratio - 50.0) // 5.0) * 10


def compute_mask_penalty(matrix_bool: Iterable[Iterable[bool]]) -> int:
    """
    Calculate total mask penalty score for a QR code matrix.

    Args:
        matrix_bool (Iterable[Iterable[bool]]): QR matrix rows (True=dark)

    Returns:
        int: N1 + N2 + N4 (lower is better)
    """
    rows = [[bool(v) for v in row] for row in matrix_bool]
    return penalty_N1(rows) + penalty_N2(rows) + penalty_N4(rows)
