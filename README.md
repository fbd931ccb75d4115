# oddflash

A small stimulus program for oddball experiments. It shows a full-screen,
black window and flashes a sequence of two images: a frequent "standard"
image and a rare "deviant" image. About 80 % of the flashes are standards;
deviants never come first or second and never appear twice in a row.

Each flash sends an event code over TCP to a trigger server on the local
machine, so a recording system can mark the moment of each stimulus.

## Installing

```
pip install .
```

Pillow is used to load and scale the images; the windows use Tkinter from
the standard library, which must be available in your Python installation.

## Running

```
oddflash
```

A settings window opens with four fields:

| Field               | Default | Meaning                                        |
|---------------------|---------|------------------------------------------------|
| Port Address        | 8888    | TCP port of the trigger server (decimal)       |
| Flash Interval (ms) | 500     | blank time between flashes (1–10000)           |
| Flash Duration (ms) | 500     | how long each image stays on screen (1–10000)  |
| Max Flashes         | 120     | number of flashes in one run (1–10000)         |

Press **Confirm** to start a run. If an interval, duration or flash count is
not an integer in range, an error dialog is shown and no run starts. The port
field is read as a decimal number and narrowed to a signed 16-bit value; text
that is not a decimal integer is read as 0.

The stimulus window goes full screen and starts a new flash every interval
plus duration milliseconds; each image is cleared after the duration. When the
run is over the window closes itself; press Confirm again for another run.
Confirming while a run is in progress closes the old window first.

Images are read from `./res/1_output_135_degree.png` (standard) and
`./res/1_red_output_135_degree.png` (deviant), relative to the working
directory, and scaled to fit within 800 × 800 pixels. An image that cannot be
loaded is logged and left blank.

## Trigger codes

The client connects to `127.0.0.1` (port 8888 at first, 3 second timeout) and
reconnects when a run uses a different port. Each code is written as a
big-endian signed 16-bit integer (`oddflash.session.Signal`):

| Event          | Code   |
|----------------|--------|
| run start      | `0x00` |
| standard flash | `0x01` |
| deviant flash  | `0x02` |
| run end        | `0xff` |

If the trigger server cannot be reached the run still takes place; codes are
not sent and a warning is logged.

## Using the pieces from Python

```python
import random
from oddflash.sequence import make_sequence, Stimulus
from oddflash.trigger import TriggerClient, encode_short

order = make_sequence(120, random.Random(1))
print(sum(s is Stimulus.DEVIANT for s in order))  # 24

print(encode_short(0xFF))                         # b'\x00\xff'

with TriggerClient("127.0.0.1", 8888, 3.0) as client:
    if client.is_available():
        client.send(8888, 0x01)
```

`oddflash.settings.Settings.from_text(...)` parses the four form fields and
raises `SettingsError` for bad values.

`oddflash.session.FlashSession` runs the flash logic without a display. Give
it any object with `is_available()` and `send(port, data)`, call
`start(interval, duration, max_flashes, port)`, then `step()` once per
`period()` milliseconds; `step()` returns the shown `Stimulus`, and `None`
once the run has ended, after which `finished()` is true.

## Tests

```
pip install .[test]
pytest
```