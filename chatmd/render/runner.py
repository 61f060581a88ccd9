import argparse
import json
import sys

from chatmd.config import load_settings

from .pipeline import MarkdownStream


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _iter_chunks(text: str, size: int):
    if size <= 0:
        yield text
        return
    for i in range(0, len(text), size):
        yield text[i : i + size]


def main(argv=None):
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Normalize LLM markdown the way the chat view renders it")

    parser.add_argument("md_path", help="Markdown file to process, or - for stdin")
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=settings.chunk_size,
        help="Replay the input as a stream of N-character chunks (default: whole input)",
    )
    parser.add_argument("--segments", action="store_true", help="Print hard-break segments as JSON")
    parser.add_argument("--keep-artifacts", action="store_true", help="Do not strip trailing cursor glyphs mid-stream")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print every intermediate render")

    args = parser.parse_args(argv)

    try:
        text = _read_source(args.md_path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    stream = MarkdownStream(strip_artifacts=settings.strip_artifacts and not args.keep_artifacts)
    for i, chunk in enumerate(_iter_chunks(text, args.chunk_size)):
        out = stream.feed(chunk)
        if args.verbose:
            print(f"[CHUNK {i}] pending={stream.pending!r}\n{out}", file=sys.stderr, flush=True)
    stream.finish()

    if args.segments:
        print(json.dumps([seg.model_dump() for seg in stream.segments()], ensure_ascii=False, indent=2))
    else:
        print(stream.text)


if __name__ == "__main__":
    main()
