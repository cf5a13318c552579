from unittest import mock

import pytest

from um98x.detect import Receiver, check_um98x, main

GGA = b"$GNGGA,123519.00,4807.0380000,N,01131.0000000,E,4,12,0.9,545.4,M,46.9,M,1.0,0000*47\r\n"


class FakePort:
    def __init__(self, device_baud=None, reply=b""):
        self.device_baud = device_baud
        self.reply = reply
        self.baudrate = 9600
        self.buffer = b""
        self.writes = []

    @property
    def in_waiting(self):
        return len(self.buffer)

    def write(self, data):
        self.writes.append((self.baudrate, bytes(data)))
        if data == b"VERSION\r\n" and self.baudrate == self.device_baud:
            self.buffer += self.reply
        return len(data)

    def read(self, size=1):
        data, self.buffer = self.buffer[:size], self.buffer[size:]
        return data

    def read_until(self, expected=b"\n", size=None):
        idx = self.buffer.find(expected)
        if idx != -1 and (size is None or idx + len(expected) <= size):
            take = idx + len(expected)
        else:
            take = len(self.buffer) if size is None else min(size, len(self.buffer))
        return self.read(take)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def commands(port):
    return [data for _, data in port.writes]


def test_detects_um982_at_default_rate_without_reconfiguring():
    port = FakePort(460800, b"#VERSION,UM982,R4.10\r\n")
    assert check_um98x(port, pause=0) is Receiver.UM982
    assert commands(port) == [b"VERSION\r\n"]


def test_um981_at_other_rate_is_switched():
    port = FakePort(115200, b"#VERSION,UM981,R4.10\r\n")
    assert check_um98x(port, pause=0) is Receiver.UM981
    assert port.writes[1:] == [
        (115200, b"CONFIG COM1 460800\r\n"),
        (115200, b"CONFIG COM2 460800\r\n"),
        (115200, b"CONFIG COM3 460800\r\n"),
        (460800, b"SAVECONFIG\r\n"),
    ]
    assert port.baudrate == 460800


def test_no_receiver_probes_every_rate_in_order():
    port = FakePort()
    assert check_um98x(port, pause=0) is None
    assert port.writes == [
        (460800, b"VERSION\r\n"),
        (115200, b"VERSION\r\n"),
        (921600, b"VERSION\r\n"),
    ]


def test_other_lines_are_skipped():
    port = FakePort(921600, b"garbage\r\nmore\r\n#VERSION,UM982,R4.10\r\n")
    assert check_um98x(port, pause=0) is Receiver.UM982
    assert b"SAVECONFIG\r\n" in commands(port)


def test_data_after_version_line_is_left_in_port():
    port = FakePort(460800, b"#VERSION,UM981\r\n" + GGA)
    assert check_um98x(port, pause=0) is Receiver.UM981
    assert port.buffer == GGA


def test_overlong_line_stops_scan():
    port = FakePort(460800, b"x" * 2048)
    assert check_um98x(port, pause=0) is None
    assert commands(port) == [b"VERSION\r\n"]


def test_custom_baudrates():
    port = FakePort(57600, b"#VERSION,UM982\r\n")
    assert check_um98x(port, baudrates=[9600, 57600], pause=0) is Receiver.UM982
    assert [baud for baud, data in port.writes if data == b"VERSION\r\n"] == [9600, 57600]


def test_main_prints_position(capsys):
    port = FakePort(460800, b"#VERSION,UM982\r\n" + GGA)
    with mock.patch("serial.Serial", return_value=port) as opener:
        assert main(["/dev/ttyFAKE0", "--limit", "1"]) == 0
    assert opener.call_args.args[0] == "/dev/ttyFAKE0"
    assert capsys.readouterr().out.splitlines() == ["4807.0380000", "01131.0000000"]


def test_main_requires_device():
    with pytest.raises(SystemExit):
        main([])