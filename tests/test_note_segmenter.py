import unittest

from fret_log.detection.note_segmenter import NoteSegmenter
from fret_log.note_types import DetectedNote


def stream(*events):
    """Build detections from (note_name, timestamp) pairs."""
    return [
        DetectedNote(note_name=name, frequency=100.0 + i, timestamp=t, confidence=0.9)
        for i, (name, t) in enumerate(events)
    ]


class TestNoteSegmenter(unittest.TestCase):
    def setUp(self):
        self.segmenter = NoteSegmenter(minimum_note_duration=0.2)

    def test_empty_input(self):
        self.assertEqual(self.segmenter.segment([]), [])

    def test_single_detection_is_kept(self):
        result = self.segmenter.segment(stream(("C4", 0.0)))
        self.assertEqual([n.note_name for n in result], ["C4"])

    def test_collapses_repeats_keeping_first_detection(self):
        detections = stream(("C4", 0.0), ("C4", 0.05), ("C4", 0.1), ("D4", 0.3))
        result = self.segmenter.segment(detections)
        self.assertEqual([n.note_name for n in result], ["C4", "D4"])
        self.assertIs(result[0], detections[0])

    def test_short_blip_between_long_notes_is_dropped(self):
        detections = stream(
            ("C4", 0.0), ("C4", 0.1), ("C4", 0.2),
            ("G#4", 0.3),
            ("D4", 0.35), ("D4", 0.45), ("D4", 0.55), ("D4", 0.65),
        )
        result = self.segmenter.segment(detections)
        self.assertEqual([n.note_name for n in result], ["C4", "D4"])

    def test_short_tail_note_is_kept(self):
        detections = stream(("C4", 0.0), ("C4", 0.25), ("D4", 0.3))
        result = self.segmenter.segment(detections)
        self.assertEqual([n.note_name for n in result], ["C4", "D4"])

    def test_duration_boundary_is_inclusive(self):
        detections = stream(("C4", 0.0), ("D4", 0.25), ("E4", 0.5))
        segmenter = NoteSegmenter(minimum_note_duration=0.25)
        result = segmenter.segment(detections)
        self.assertEqual([n.note_name for n in result], ["C4", "D4", "E4"])

    def test_output_is_time_ordered(self):
        detections = stream(
            ("C4", 0.0), ("D4", 0.3), ("E4", 0.6), ("E4", 0.7), ("F4", 1.0)
        )
        result = self.segmenter.segment(detections)
        timestamps = [n.timestamp for n in result]
        self.assertEqual(timestamps, sorted(timestamps))

    def test_returning_to_same_note_after_blip(self):
        detections = stream(
            ("C4", 0.0), ("D4", 0.3), ("E4", 0.6), ("D4", 0.65), ("D4", 0.9)
        )
        result = self.segmenter.segment(detections)
        # E4 is dropped, leaving two separate D4 notes
        self.assertEqual([n.note_name for n in result], ["C4", "D4", "D4"])


if __name__ == "__main__":
    unittest.main()
