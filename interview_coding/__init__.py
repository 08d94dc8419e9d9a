"""
Interview coding package.

This package contains the core of a tool for qualitative coding of interview
transcripts:
- reading transcripts from different source formats into one model,
- stepping through the statements with a window of surrounding context,
- attaching code references to individual statements.
"""
