# palkit

Small building blocks for MIDI processing tools. It has no dependencies
outside the standard library.

## What is inside

- `palkit.voice_allocator`: `VoiceAllocator` assigns notes to the voices of a
  polyphonic instrument, with at most `MAX_POLYPHONY` (20) voices. A note that
  a voice already holds goes back to that voice. A new note gets the least
  recently touched inactive voice. When every voice is active, it steals the
  least recently touched one. `note_on` and `note_off` return the voice index,
  or `None`. The `voices` property gives each voice's `VoiceEntry`
  (`note`, `active`).
- `palkit.note_map`: `NoteMap` is a fixed number of `NoteMapEntry` slots that
  map note numbers to values. `put` reuses the note's own slot if it has one,
  then a free slot, and the first slot when the map is full. `find` returns the
  entry or `None`.
- `palkit.op`: helpers for 8-, 16- and 24-bit fixed-point arithmetic. They
  cover clipping (`clip`, `s16_clip_u8`, ...), crossfading and mixing
  (`u8_mix`, `u8_mix_gains`, `s8_mix`, ...), multiply-and-shift (`u8u8_mul_shift8`,
  `s16u16_mul_shift16`, ...) and table interpolation (`interpolate_sample`).
  They also include the `Uint24` 16.8 value type with `u24_add`, `u24_add_c`,
  `u24_sub` and the shifts. Results wrap the way fixed-width registers do.
- `palkit.ring_buffer`: `RingBuffer` is a circular FIFO whose size is a power of
  two from 1 to 128. One slot always stays free. `write` raises
  `BufferFullError` and `read` raises `BufferEmptyError`. `non_blocking_write`
  returns `False` and `non_blocking_read` returns `None` instead of raising.
  `data_type_bits_for_size` gives the register width (8 or 16 bits) for a data
  size.
- `palkit.event_queue`: `EventQueue` queues `Event`s from controls
  (`ControlType.POT`, `ENCODER`, `ENCODER_CLICK`, `SWITCH`). It also tracks idle
  time since the last `touch()`, using a millisecond clock that you can
  replace.
- `palkit.task`: `NaiveScheduler` spreads each `Task` over a table of slots, as
  many times as its priority. `step()` runs the next slot and `run(steps)` runs
  several.
- `palkit.output_stream`: `OutputStream` hands bytes one at a time to a write
  callable. Strings, `bytes`, integers (in decimal) and `EndOfLine.ENDL` (as
  `\r\n`) can be written, and calls chain with `<<`.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from palkit.voice_allocator import VoiceAllocator

voices = VoiceAllocator(2)
voices.note_on(60)   # 0
voices.note_on(64)   # 1
voices.note_on(67)   # 0: both voices busy, the older one is stolen
voices.note_off(64)  # 1
```

```python
from palkit.ring_buffer import RingBuffer, BufferFullError

buffer = RingBuffer(4)
for value in (1, 2, 3):
    buffer.write(value)
try:
    buffer.write(4)
except BufferFullError:
    pass              # a size-4 buffer holds three values
buffer.read()         # 1
```

```python
from palkit.op import Uint24, u24_add_c, u8_mix

u8_mix(0, 255, 128)                                  # 127
u24_add_c(Uint24(0xFFFF, 0xFF), Uint24(0, 1)).carry  # 1
```

```python
from palkit.output_stream import EndOfLine, OutputStream

out = bytearray()
OutputStream(out.append) << "bpm " << 120 << EndOfLine.ENDL
bytes(out)  # b"bpm 120\r\n"
```

## What it does not do

The package does not read MIDI. It has no parser that turns a raw MIDI byte
stream into note, controller or clock events, and it does not talk to MIDI
ports or other hardware. Your own code has to decode incoming messages and
call `VoiceAllocator`, `NoteMap` and the other pieces with note numbers and
values it has already extracted.