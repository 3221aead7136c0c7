"""Read and write whole text files as vectors of lines."""

from typing import IO, Iterable

from adtkit.vector import Vector


def read_stream_as_vector(stream: IO[str]) -> Vector:
    """Return a Vector with one element per line of ``stream``, without the newline."""
    vec = Vector()
    for line in stream:
        vec.append(line[:-1] if line.endswith("\n") else line)
    return vec


def read_file_as_vector(filename: str) -> Vector:
    """Return the lines of ``filename`` as a Vector; raise OSError if it cannot be read."""
    with open(filename, "r", encoding="utf-8", errors="surrogateescape", newline="\n") as file:
        return read_stream_as_vector(file)


def write_vector_to_stream(stream: IO[str], vec: Iterable[str]) -> int:
    """Write each string followed by a newline; return the number of characters written."""
    written = 0
    for line in vec:
        text = f"{line}\n"
        stream.write(text)
        written += len(text)
    return written


def write_vector_to_file(filename: str, vec: Iterable[str]) -> int:
    """Write the strings to ``filename``, one per line; return the characters written."""
    with open(filename, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as file:
        return write_vector_to_stream(file, vec)