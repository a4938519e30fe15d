"""
hash_table_ops.py — Hash Table Operations
==========================================
Every hash-table trace has the same spine:

    HASH    – sum the character codes, take it modulo bucket_count
    BUCKET  – jump straight to that chain
    SCAN    – compare each entry's key in the chain, in order
    …then UPDATE / INSERT, FOUND / NOT_FOUND or REMOVE / NOT_FOUND.

The scan is what makes collisions visible: two keys that land in the
same bucket show up as a chain that has to be walked.
"""

from typing import Any, Generator, List

from structures import HashTable, OpResult, Reason, char_code_total
from operations.step import Step, StepBuilder, StepKind


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
HASH_PSEUDOCODE: List[str] = [
    "def hash(key):",                               # 0
    "    total ← sum of char codes in key",         # 1
    "    return total mod bucket_count",            # 2
]

INSERT_PSEUDOCODE: List[str] = HASH_PSEUDOCODE + [
    "def insert(key, value):",                      # 3
    "    chain ← buckets[hash(key)]",               # 4
    "    for entry in chain:",                      # 5
    "        if entry.key == key:",                 # 6
    "            entry.value ← value; return",      # 7
    "    chain.append((key, value))",               # 8
]

GET_PSEUDOCODE: List[str] = HASH_PSEUDOCODE + [
    "def get(key):",                                # 3
    "    chain ← buckets[hash(key)]",               # 4
    "    for entry in chain:",                      # 5
    "        if entry.key == key:",                 # 6
    "            return entry.value",               # 7
    "    return NONE",                              # 8
]

DELETE_PSEUDOCODE: List[str] = HASH_PSEUDOCODE + [
    "def delete(key):",                             # 3
    "    chain ← buckets[hash(key)]",               # 4
    "    for entry in chain:",                      # 5
    "        if entry.key == key:",                 # 6
    "            chain.remove(entry); return True", # 7
    "    return False",                             # 8
]


# ---------------------------------------------------------------------------
# Shared spine: HASH → BUCKET → SCAN …
# ---------------------------------------------------------------------------
def _locate(sb: StepBuilder, table: HashTable, key: str) -> Generator[Step, None, int]:
    """Yields HASH, BUCKET and one SCAN per entry up to the match.  Returns the match position or -1."""
    total = char_code_total(key)
    index = table.hash(key)
    yield sb.step(StepKind.HASH, subject=key, locator=index, line=2,
                  note=f"hash('{key}') = {total} mod {table.bucket_count} = {index}.")

    chain = table.bucket(index)
    sb.overlay["bucket"] = index
    sb.overlay["chain"] = [entry.key for entry in chain]
    yield sb.step(StepKind.BUCKET, subject=key, locator=index, line=4,
                  note=f"Go to bucket {index}, which holds {len(chain)} entr{'y' if len(chain) == 1 else 'ies'}.")

    for pos, entry in enumerate(chain):
        if entry.key == key:
            yield sb.step(StepKind.SCAN, subject=entry.key, locator=pos, line=6,
                          note=f"Entry {pos} has key '{entry.key}': match.")
            return pos
        yield sb.step(StepKind.SCAN, subject=entry.key, locator=pos, line=5,
                      note=f"Entry {pos} has key '{entry.key}' (collision), keep scanning.")
    return -1


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------
def insert(table: HashTable, key: str, value: Any) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    pos = yield from _locate(sb, table, key)

    index = table.insert(key, value)
    sb.overlay["chain"] = [entry.key for entry in table.bucket(index)]
    if pos >= 0:
        yield sb.step(StepKind.UPDATE, subject=key, locator=index, line=7,
                      note=f"'{key}' already exists in bucket {index}: overwrite its value with '{value}'.")
    else:
        yield sb.step(StepKind.INSERT, subject=key, locator=index, line=8,
                      note=f"Append ('{key}', '{value}') to the chain in bucket {index}.")
    return OpResult.ok(index=index, value=value)


def get(table: HashTable, key: str) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    pos = yield from _locate(sb, table, key)
    index = table.hash(key)

    if pos >= 0:
        value = table.get(key)
        yield sb.step(StepKind.FOUND, subject=key, locator=index, line=7,
                      note=f"Found '{key}' in bucket {index}: value '{value}'.")
        return OpResult.ok(index=index, value=value)

    yield sb.step(StepKind.NOT_FOUND, subject=key, locator=index, line=8,
                  note=f"'{key}' is not in bucket {index}, so it is not in the table.")
    return OpResult.fail(Reason.NOT_FOUND, index=index)


def delete(table: HashTable, key: str) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    pos = yield from _locate(sb, table, key)

    result = table.delete(key)
    if pos >= 0:
        sb.overlay["chain"] = [entry.key for entry in table.bucket(result.index)]
        yield sb.step(StepKind.REMOVE, subject=key, locator=result.index, line=7,
                      note=f"Remove '{key}' from bucket {result.index}.")
    else:
        yield sb.step(StepKind.NOT_FOUND, subject=key, locator=result.index, line=8,
                      note=f"'{key}' is not in the table. Nothing to delete.")
    return result
