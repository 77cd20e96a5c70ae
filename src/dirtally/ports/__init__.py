from .transcript import TranscriptParserPort

__all__ = ["TranscriptParserPort"]
