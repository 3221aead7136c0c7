"""Print the contents of files, or standard input, to standard output."""

import sys
from typing import IO, List, Optional

from adtkit.io import read_file_as_vector, read_stream_as_vector, write_vector_to_stream


def process_file(
    filename: str,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
    stderr: Optional[IO[str]] = None,
) -> bool:
    """Copy one file ("-" for standard input) to output; return whether it was read."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    try:
        vec = read_stream_as_vector(stdin) if filename == "-" else read_file_as_vector(filename)
    except (OSError, UnicodeDecodeError):
        stderr.write(f"cat: {filename}: cannot read file\n")
        return False
    write_vector_to_stream(stdout, vec)
    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command with ``argv`` (without the program name)."""
    args = sys.argv[1:] if argv is None else list(argv)
    for filename in args or ["-"]:
        process_file(filename)
    return 0


if __name__ == "__main__":
    sys.exit(main())