"""Building blocks for small MIDI processors: voice allocation, note maps,
fixed-point helpers, ring buffers, event queues, scheduling and output streams."""

__version__ = "0.1.0"

__all__ = [
    "event_queue",
    "note_map",
    "op",
    "output_stream",
    "ring_buffer",
    "task",
    "voice_allocator",
]