"""Run-length encoding of text, single-threaded and split across threads."""

from __future__ import annotations

import argparse
import re
import sys
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from itertools import groupby
from pathlib import Path

THREADS = 4

_RUN_PATTERN = re.compile(r"(.)([0-9]*)", re.DOTALL)
_print_lock = threading.Lock()


def rle_compress(data: str) -> str:
    """Encode each run as the character followed by its decimal length."""
    return "".join(f"{ch}{sum(1 for _ in run)}" for ch, run in groupby(data))


def rle_decompress(data: str) -> str:
    """Expand character/length pairs; raise ValueError if a length is missing."""
    pieces = []
    for match in _RUN_PATTERN.finditer(data):
        ch, digits = match.groups()
        if not digits:
            raise ValueError(f"missing run length after {ch!r} at offset {match.start()}")
        pieces.append(ch * int(digits))
    return "".join(pieces)


def split_chunks(data: str, parts: int) -> list[str]:
    """Split into equal pieces; the last piece also takes the remainder."""
    if parts < 1:
        raise ValueError("parts must be at least 1")
    size = len(data) // parts
    head = [data[i * size:(i + 1) * size] for i in range(parts - 1)]
    return head + [data[(parts - 1) * size:]]


def _run_threaded(func: Callable[[str], str], chunks: Sequence[str], verb: str) -> str:
    def work(numbered: tuple[int, str]) -> str:
        thread_id, chunk = numbered
        result = func(chunk)
        with _print_lock:
            print(f"Thread {thread_id} completed {verb}.")
        return result

    if not chunks:
        return ""
    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        return "".join(pool.map(work, enumerate(chunks, start=1)))


def compress_chunks(chunks: Sequence[str]) -> str:
    """Compress each chunk in its own thread and join the results in order."""
    return _run_threaded(rle_compress, chunks, "compression")


def decompress_chunks(chunks: Sequence[str]) -> str:
    """Decompress each chunk in its own thread and join the results in order."""
    return _run_threaded(rle_decompress, chunks, "decompression")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run-length encode a text file.")
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("--compressed", default="compressed.txt")
    parser.add_argument("--decompressed", default="decompressed.txt")
    args = parser.parse_args(argv)

    try:
        data = Path(args.input).read_text(encoding="utf-8")
    except OSError:
        print(f"Failed to open {args.input}", file=sys.stderr)
        return 1

    start = time.perf_counter()
    rle_compress(data)
    print(f"Single-threaded compression time: {time.perf_counter() - start} sec")

    start = time.perf_counter()
    multi_compressed = compress_chunks(split_chunks(data, THREADS))
    print(f"Multi-threaded compression time: {time.perf_counter() - start} sec")
    Path(args.compressed).write_text(multi_compressed, encoding="utf-8")

    start = time.perf_counter()
    try:
        decompressed = decompress_chunks(split_chunks(multi_compressed, THREADS))
    except ValueError as exc:
        print(f"Decompression failed: {exc}", file=sys.stderr)
        return 1
    print(f"Multi-threaded decompression time: {time.perf_counter() - start} sec")
    Path(args.decompressed).write_text(decompressed, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())