from .note_segmenter import NoteSegmenter

__all__ = ["NoteSegmenter"]
