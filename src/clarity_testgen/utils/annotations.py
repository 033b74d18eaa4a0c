"""
Annotation extraction for Clarity test contracts.

Test functions are documented with comment tags directly above the
declaration:

    ;; @name Transfers tokens
    ;; @caller wallet_1
    ;; @mine-blocks-before 3
    (define-public (test-transfer) ...)

Each tag becomes a key of the function's annotation map. A tag with a value
maps to the trimmed value, a bare tag maps to True.
"""

import re
from typing import Dict, List, Optional, Tuple, Union

from . import DEFAULT_PREPARE_FUNCTION

AnnotationValue = Union[str, bool]
AnnotationMap = Dict[str, AnnotationValue]

DECLARATION_PATTERN = re.compile(r'[ \t]*\(define-public\s+\(([^\s|()]+)')
COMMENT_PATTERN = re.compile(r'[ \t]*;;')
BLOCK_START_PATTERN = re.compile(r'[ \t]*;;[ \t]*@')
ANNOTATION_PATTERN = re.compile(r'[ \t]*;;[ \t]+@([a-z-]+)(?:[ \t]+(.*))?$')


def _find_annotated_declarations(source: str) -> List[Tuple[str, List[str]]]:
    """Pair every public declaration with the comment block right above it."""
    lines = source.split('\n')
    offsets = []
    position = 0
    for line in lines:
        offsets.append(position)
        position += len(line) + 1

    found = []
    for index, line in enumerate(lines):
        if not line.lstrip().startswith('(define-public'):
            continue
        # the signature may start on a following line
        match = DECLARATION_PATTERN.match(source, offsets[index])
        if not match:
            continue

        start = index
        while start > 0 and COMMENT_PATTERN.match(lines[start - 1]):
            start -= 1
        block = lines[start:index]
        while block and not BLOCK_START_PATTERN.match(block[0]):
            block.pop(0)
        if block:
            found.append((match.group(1), block))
    return found


def parse_annotation_line(line: str) -> Optional[Tuple[str, AnnotationValue]]:
    """Return (key, value) for a `;; @key value` line, None for anything else"""
    match = ANNOTATION_PATTERN.match(line)
    if not match:
        return None
    key, value = match.group(1), (match.group(2) or '').strip()
    return key, value or True


def parse_annotation_block(lines: List[str]) -> AnnotationMap:
    annotations: AnnotationMap = {}
    for line in lines:
        parsed = parse_annotation_line(line)
        if parsed:
            key, value = parsed
            annotations[key] = value
    return annotations


def extract_test_annotations(contract_source: str) -> Dict[str, AnnotationMap]:
    """Map each annotated public function of a contract to its annotations.

    Functions without a tag block are left out; callers treat a missing
    entry as an empty map. When a function is declared twice the last
    block wins.
    """
    source = contract_source.replace('\r', '')
    return {
        function_name: parse_annotation_block(block)
        for function_name, block in _find_annotated_declarations(source)
    }


def apply_prepare_defaults(annotations: AnnotationMap, has_default_prepare: bool) -> AnnotationMap:
    """Inject the contract's default `prepare` call unless `no-prepare` is set."""
    result = dict(annotations)
    if has_default_prepare and not result.get('prepare'):
        result['prepare'] = DEFAULT_PREPARE_FUNCTION
    if result.get('no-prepare'):
        result.pop('prepare', None)
    return result
