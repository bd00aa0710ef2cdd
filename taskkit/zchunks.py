"""Compress and decompress files in fixed-size zlib chunks using threads."""

from __future__ import annotations

import argparse
import sys
import time
import zlib
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import BinaryIO

CHUNK_SIZE = 16384
NUM_THREADS = 4


class ChunkError(Exception):
    """A chunk could not be compressed or decompressed."""


def compress_chunk(data: bytes, level: int = zlib.Z_DEFAULT_COMPRESSION) -> bytes:
    """Compress one chunk into a complete zlib stream."""
    try:
        compressor = zlib.compressobj(level)
        return compressor.compress(data) + compressor.flush(zlib.Z_FINISH)
    except (zlib.error, ValueError) as exc:
        raise ChunkError(f"compression failed: {exc}") from exc


def decompress_chunk(data: bytes, capacity: int = CHUNK_SIZE * 2) -> bytes:
    """Inflate the first zlib stream in data, producing at most capacity bytes."""
    if capacity < 1:
        raise ValueError("capacity must be positive")
    decompressor = zlib.decompressobj()
    try:
        out = decompressor.decompress(data, capacity)
    except zlib.error as exc:
        raise ChunkError(f"decompression failed: {exc}") from exc
    if not decompressor.eof:
        raise ChunkError("stream did not end within the input or output capacity")
    return out


def _read_chunks(src: BinaryIO) -> list[bytes]:
    return list(iter(lambda: src.read(CHUNK_SIZE), b""))


def _process(chunks: list[bytes], func: Callable[[bytes], bytes], action: str) -> list[bytes]:
    def work(numbered: tuple[int, bytes]) -> bytes:
        index, chunk = numbered
        try:
            return func(chunk)
        except ChunkError as exc:
            raise ChunkError(f"{action} failed for chunk {index}") from exc

    with ThreadPoolExecutor(max_workers=NUM_THREADS) as pool:
        return list(pool.map(work, enumerate(chunks)))


def compress_file_threaded(
    input_file: str | Path, output_file: str | Path, level: int = zlib.Z_BEST_COMPRESSION
) -> int:
    """Compress each CHUNK_SIZE piece of input_file separately; return the chunk count."""
    with open(input_file, "rb") as src, open(output_file, "wb") as dst:
        chunks = _read_chunks(src)
        results = _process(chunks, lambda c: compress_chunk(c, level), "Compression")
        dst.writelines(results)
    return len(results)


def decompress_file_threaded(input_file: str | Path, output_file: str | Path) -> int:
    """Inflate each CHUNK_SIZE piece of input_file separately; return the chunk count."""
    with open(input_file, "rb") as src, open(output_file, "wb") as dst:
        chunks = _read_chunks(src)
        results = _process(chunks, decompress_chunk, "Decompression")
        dst.writelines(results)
    return len(results)


def measure_execution_time(func: Callable[[], object]) -> int:
    """Call func and return how long it took in whole milliseconds."""
    start = time.perf_counter()
    func()
    return int((time.perf_counter() - start) * 1000)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Chunked zlib compression benchmark.")
    parser.add_argument("--lines", type=int, default=1_000_000)
    parser.add_argument("--input", default="test.txt")
    parser.add_argument("--compressed", default="test.txt.gz")
    parser.add_argument("--decompressed", default="test_decompressed.txt")
    args = parser.parse_args(argv)

    with open(args.input, "w", encoding="utf-8") as out:
        out.writelines(f"This is a test line. {i}\n" for i in range(args.lines))

    def guarded(job: Callable[[], object]) -> Callable[[], None]:
        def run() -> None:
            try:
                job()
            except (ChunkError, OSError) as exc:
                print(exc, file=sys.stderr)

        return run

    print("Starting compression...")
    elapsed = measure_execution_time(
        guarded(lambda: compress_file_threaded(args.input, args.compressed, zlib.Z_BEST_COMPRESSION))
    )
    print(f"Compression time: {elapsed} ms")

    print("Starting decompression...")
    elapsed = measure_execution_time(
        guarded(lambda: decompress_file_threaded(args.compressed, args.decompressed))
    )
    print(f"Decompression time: {elapsed} ms")

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())