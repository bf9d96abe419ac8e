# -*- coding: utf-8 -*-
"""
QR Code Generator Module

Builds a complete QR symbol from a payload: version selection, codeword
encoding, function patterns, data placement and the mask search.

Functions:
    encode: Encode a payload into a Matrix
    evaluate_all_masks: Score all mask patterns to find the optimal one
"""

import logging
from typing import Dict, List, Tuple, Union

from .codewords import encode_payload, select_version
from .functional_areas import build_function_mask, build_function_patterns
from .masks import MASK_FUNCTIONS, apply_mask, place_format_info, place_version_info
from .matrix import Matrix, ModuleGrid
from .penalties import compute_mask_penalty
from .placement import place_data

logger = logging.getLogger(__name__)


def _to_bytes(text: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(text, str):
        return text.encode('utf-8')
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    raise TypeError(f"Expected str or bytes, got {type(text).__name__}")


def _finish(grid: ModuleGrid, reserved: List[List[bool]], version: int, mask: int) -> None:
    apply_mask(grid, reserved, mask)
    place_format_info(grid, mask)
    place_version_info(grid, version)


def evaluate_all_masks(
    grid: ModuleGrid,
    reserved: List[List[bool]],
    version: int
) -> Tuple[int, int, Dict[int, int]]:
    """
    Evaluate all mask patterns (0-7) to find the optimal one.

    Each mask is tried on a clone of the grid, together with its format and
    version information, and scored with compute_mask_penalty. Masks are
    tried in ascending order and only a strictly lower score replaces the
    current best, so ties go to the lowest mask index.

    Args:
        grid (ModuleGrid): Unmasked grid with data placed (not modified)
        reserved (List[List[bool]]): Reserved-cell mask of the grid
        version (int): QR code version (1-40)

    Returns:
        Tuple[int, int, Dict[int, int]]: (best_mask, best_score, all_scores)
            - best_mask: Mask pattern with lowest penalty (0-7)
            - best_score: Penalty score of the best mask
            - all_scores: Dictionary mapping mask -> penalty score
    """
    scores = {}
    best_mask = None
    best_score = None

    for mask_pattern in range(len(MASK_FUNCTIONS)):
        candidate = grid.clone()
        _finish(candidate, reserved, version, mask_pattern)
        penalty_score = compute_mask_penalty(candidate.to_rows())
        scores[mask_pattern] = penalty_score

        if best_score is None or penalty_score < best_score:
            best_score = penalty_score
            best_mask = mask_pattern

    logger.debug("Mask scores for version %d: %s", version, scores)
    return best_mask, best_score, scores


def encode(text: Union[str, bytes]) -> Matrix:
    """
    Encode a payload into a QR symbol.

    The payload is encoded in byte mode at error correction level L using
    the smallest version that fits it. Text is encoded as UTF-8 first.

    Args:
        text (Union[str, bytes]): The data to encode

    Returns:
        Matrix: Finished symbol with its version, mask and penalty

    Raises:
        DataTooLarge: If the payload does not fit in version 40
        TypeError: If text is neither str nor bytes

    Example:
        >>> symbol = encode("HELLO")
        >>> symbol.version, symbol.size
        (1, 21)
    """
    payload = _to_bytes(text)
    descriptor = select_version(len(payload))
    version = descriptor.version

    grid = build_function_patterns(version)
    reserved = build_function_mask(grid)
    remainder = place_data(grid, reserved, encode_payload(payload, descriptor))

    best_mask, best_score, _ = evaluate_all_masks(grid, reserved, version)
    _finish(grid, reserved, version, best_mask)

    logger.debug(
        "Encoded %d bytes as version %d (%d remainder bits), mask %d, penalty %d",
        len(payload), version, remainder, best_mask, best_score,
    )
    return Matrix.from_grid(grid, version, best_mask, best_score)
