from .shell_transcript import ShellTranscriptParser

__all__ = ["ShellTranscriptParser"]
