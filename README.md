# libft

`libft` is a small library of everyday helpers. It uses only the standard library.

## Modules

- `libft.chars` has ASCII character tests and case conversion. These are
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`,
  `to_lower`, `to_upper` and `str_to_lower`. Each character function takes
  either an int code or a one-character str. `to_lower` and `to_upper` return
  the same type they were given.
- `libft.numeric` has `abs_value`, `average`, `maximum` and `minimum`.
  - `average` truncates toward zero.
  - `maximum` and `minimum` return the first argument on a tie.
  - `largest_index` and `smallest_index` give the position of the first extreme
    value in a sequence. They return 0 for an empty sequence or `None`.
- `libft.memory` works on `bytearray` buffers. It has `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove` and `memset`.
  - `memchr` returns an index, or `None` when the byte is not found.
  - `memmove(buffer, dest, src, n)` moves bytes between offsets inside one
    buffer. Overlapping ranges are handled.
  - A byte count that is negative or larger than the buffer raises an error.
- `libft.output` has `put_char`, `put_str`, `put_endl` and `put_nbr`. They write
  to a file descriptor with `os.write`.
- `libft.sorting` has `merge_sort` and `quick_sort`. Each sorts the inclusive
  range `values[start..end]` of a mutable sequence in place.
- `libft.strings` has `atoi`, `itoa`, `strchr`, `strrchr`, `strcmp`, `strncmp`,
  `strnstr`, `strlcpy` and `strlcat`. Text is treated like a C string, so
  anything after the first NUL is ignored.
  - Searches return an index, or `None`.
  - `strlcpy` and `strlcat` write NUL-terminated data into a `bytearray`. They
    return the length of the string they tried to build.
  - `atoi` wraps its result to a signed 32-bit integer. When the magnitude goes
    past the 64-bit range, it returns -1 for a positive number and 0 for a
    negative one.
- `libft.text` has `split`, `substr`, `strtrim`, `strjoin`, `strmapi` and
  `striteri`.
  - `split` drops empty pieces.
  - `striteri` returns the string after any characters that the callback
    replaced.
- `libft.reader` has `LineReader` and `get_next_line`. They read a file
  descriptor one line at a time and keep a separate buffer for each
  descriptor.
  - `LineReader(buffer_size)` reads `buffer_size` bytes per call. The default
    is 1.
  - `read_line(fd)` returns the next line with its newline, or `None` at the
    end.
  - `pending()` shows the data that has been read but not yet returned.
  - `get_next_line(fd)` uses one shared reader with a buffer size of 1.
- `libft.linked` has `Node` and `LinkedList`, a singly linked list.
  - `LinkedList` has `push_front`, `push_back`, `last`, `clear`, `for_each`,
    `map`, `len()` and iteration.
  - `clear(delete)` passes each content to `delete`, from the last to the first.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from libft.text import split, strtrim
from libft.strings import atoi, strchr
from libft.sorting import quick_sort

split("  hello  world ", " ")      # ['hello', 'world']
strtrim("xxhixx", "x")             # 'hi'
atoi("   -42abc")                  # -42
strchr("hello", "l")               # 2

values = [5, 3, 9, 1]
quick_sort(values, 0, len(values) - 1)
values                             # [1, 3, 5, 9]
```

To read a file line by line:

```python
import os
from libft.reader import LineReader

reader = LineReader(buffer_size=64)
fd = os.open("notes.txt", os.O_RDONLY)
try:
    while (line := reader.read_line(fd)) is not None:
        print(line, end="")
finally:
    os.close(fd)
```

## Limits

This package is a library only. It installs no command-line program. The line
reader works on raw file descriptors that you open and close yourself. It
decodes each line as UTF-8, and replaces any bytes that are not valid UTF-8.