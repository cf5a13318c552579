# um98x

Tools for Unicore UM981 and UM982 GNSS receivers on a serial port.

- `um98x.detect` probes a serial port at several baud rates (460800, 115200
  and 921600 by default), sends `VERSION` and recognises a UM981 or UM982
  from its reply. When the receiver was found at a rate other than
  460800 bps, it switches COM1–COM3 to 460800 and sends `SAVECONFIG`.
- `um98x.parser` reads the receiver's output one character at a time and
  decodes GGA (position), VTG (course and speed) and HPR (heading, roll and
  solution quality) sentences, passing each one to a callback you register.

## Installation

```
pip install .
```

## Detecting a receiver

```
um98x-detect /dev/ttyUSB0
um98x-detect /dev/ttyUSB0 --limit 10
```

The command logs each baud rate it tries and the `VERSION` line of the
receiver that answers, or a warning when none does. It then reads the port
at 460800 bps and prints the latitude and longitude from every GGA sentence,
until `--limit` fixes have been printed or it is interrupted with Ctrl-C.

From Python, `check_um98x()` returns a `Receiver` (`Receiver.UM981` or
`Receiver.UM982`), or `None` if nothing was recognised:

```python
import serial
from um98x.detect import check_um98x

with serial.Serial("/dev/ttyUSB0", timeout=0.1) as port:
    receiver = check_um98x(port)
    print(receiver)
```

It takes the baud rates to try and the pause between commands (seconds) as
`check_um98x(port, baudrates, pause)`. The port needs the pyserial members
`baudrate`, `write()`, `in_waiting` and `read_until()`.

## Parsing sentences

```python
import serial
from um98x.parser import Um982

with serial.Serial("/dev/ttyUSB0", 460800, timeout=0.1) as port:
    gps = Um982(port)
    gps.on_gga(lambda gga: print(gga.latitude, gga.longitude))
    gps.on_vtg(lambda vtg: print(vtg.heading, vtg.speed))
    gps.on_hpr(lambda hpr: print(hpr.heading, hpr.roll, hpr.sol_quality))
    while True:
        gps.poll()
```

`Um982.poll()` reads at most one character from the port; it raises
`RuntimeError` when the parser has no port. You can also push characters in
yourself with `Um982.feed()`, which takes a one-character `str`, a single
byte or an `int`, and returns the decoded `GgaData`, `VtgData` or `HprData`
when a line completes (otherwise `None`). This is handy when the data comes
from a file or a test:

```python
from um98x.parser import Um982

gps = Um982()
for ch in "$GPVTG,54.7,T,,M,5.5,N,10.2,K,A*48\r\n":
    result = gps.feed(ch)
print(result.speed_knots, result.speed)
```

Text fields are kept as strings, cut to fixed widths. `VtgData.speed` is
the knots value converted to metres per second; `HprData.sol_quality` is an
integer. The most recently decoded sentences stay available as the parser's
`gga`, `vtg` and `hpr` attributes.

## What it does not do

The package only detects the receiver and decodes GGA, VTG and HPR
sentences. Other sentence types are ignored, and nothing is forwarded over
a network or stored.

## Tests

```
pip install .[test]
pytest
```