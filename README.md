# taskkit

Four small utilities in one package:

- `taskkit.fileops` writes two fixed lines to a text file, appends a third line, then prints the file and returns its lines.
- `taskkit.rle` does run-length encoding of text. Each run of one character becomes that character followed by the decimal run length. The module can also encode or decode a list of chunks, one thread per chunk.
- `taskkit.zchunks` compresses a file with zlib in separate 16 KiB chunks, on up to four threads.
- `taskkit.snake` is a snake game. `SnakeState` holds the rules and `SnakeGame` runs them in a pygame window.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Commands

Each command works in the current directory.

```
taskkit-fileops [FILENAME]
```
Writes, appends to and prints `FILENAME`. The default is `sample.txt`.

```
taskkit-rle [INPUT] [--compressed PATH] [--decompressed PATH]
```
Reads `INPUT` (default `input.txt`) and times a single-threaded encoding of it. It then splits the text into four parts, encodes them on four threads and writes the result to `compressed.txt`. Finally it splits that output into four parts, decodes them on four threads and writes `decompressed.txt`. Each thread prints a line when it finishes. The exit status is 1 if the input cannot be read or the decoding fails.

```
taskkit-zchunks [--lines N] [--input PATH] [--compressed PATH] [--decompressed PATH]
```
Writes `N` test lines to `test.txt` (default 1,000,000 lines). It compresses that file into `test.txt.gz` at the highest level, then decompresses it into `test_decompressed.txt`, and prints how long each step took in milliseconds. If a step fails, the error goes to standard error and the command goes on.

```
taskkit-snake [--eat-sound PATH] [--game-over-sound PATH]
```
Opens a window of 800 by 600 pixels, which is a 40 by 30 grid. The arrow keys steer the snake. The game ends when the snake hits a wall or its own body. Each time the snake eats, the game gets 5% faster. The sounds default to `eat.wav` and `gameover.wav`. If a sound file cannot be loaded, or if audio is unavailable, the command prints a message and the game plays without that sound.

## Library use

```python
from taskkit.rle import rle_compress, rle_decompress, split_chunks, compress_chunks

encoded = rle_compress("aaabcc")        # "a3b1c2"
assert rle_decompress(encoded) == "aaabcc"
assert compress_chunks(split_chunks("aaaabbbb", 2)) == "a4b4"
```

`rle_decompress` raises `ValueError` when a character is not followed by a run length. `split_chunks` raises `ValueError` when `parts` is less than 1.

```python
from taskkit.zchunks import compress_chunk, decompress_chunk

packed = compress_chunk(b"hello" * 100, 9)
assert decompress_chunk(packed, 32768) == b"hello" * 100
```

`decompress_chunk` raises `ChunkError` in two cases: the data is not a zlib stream, or the stream does not end within the input or within `capacity` output bytes. `compress_file_threaded` and `decompress_file_threaded` return the number of chunks they processed. `measure_execution_time(func)` returns how long `func()` took, in whole milliseconds.

`SnakeState` does not need a window:

```python
import random
from taskkit.snake import SnakeState, StepResult

state = SnakeState(rng=random.Random(1))
state.steer(0, 1)                        # quarter turns only; returns whether it turned
result = state.update()                  # StepResult.MOVED, ATE or CRASHED
```

## Limitations

- The `.gz` file from `taskkit-zchunks` is not in gzip format. It is a series of raw zlib streams, one per 16 KiB input chunk. Decompression reads that file back in 16 KiB pieces and inflates only the first stream in each piece. The compressed streams are shorter than 16 KiB, so the pieces do not line up with them. The decompressed file matches the original only when the input fitted in a single chunk.
- Run-length encoding cannot tell digits in the text apart from run lengths. `taskkit-rle` also splits the encoded text into four parts by length before decoding, and a split can separate a character from its count. In either case the round trip can fail or give different text.
- The snake game has no score display, no pause and no restart key. After a crash the window stays open until it is closed.

## Tests

```
pytest
```