import pytest

from blockkit.block_buffer import BlockBuffer, BufferKind


def _run_digest(buf, inputs):
    calls = []
    poses = []
    for i, data in enumerate(inputs):
        buf.digest_blocks(data, lambda blocks, i=i: calls.append((i, list(blocks))))
        poses.append(buf.pos)
    return calls, poses


def test_eager_digest_pad():
    buf = BlockBuffer(4, BufferKind.EAGER)
    inputs = [b"01234567", b"89", b"abcdefghij", b"klmnopqrs", b"tuv", b"wx"]
    calls, poses = _run_digest(buf, inputs)
    assert calls == [
        (0, [b"0123", b"4567"]),
        (2, [b"89ab"]),
        (2, [b"cdef", b"ghij"]),
        (3, [b"klmn", b"opqr"]),
        (4, [b"stuv"]),
    ]
    assert poses == [0, 2, 0, 1, 0, 2]
    assert buf.pad_with_zeros() == b"wx\0\0"
    assert buf.pos == 0


def test_lazy_digest_pad():
    buf = BlockBuffer(4, BufferKind.LAZY)
    inputs = [b"01234567", b"89", b"abcdefghij", b"klmnopqrs"]
    calls, poses = _run_digest(buf, inputs)
    assert calls == [
        (0, [b"0123"]),
        (1, [b"4567"]),
        (2, [b"89ab"]),
        (2, [b"cdef"]),
        (3, [b"ghij"]),
        (3, [b"klmn", b"opqr"]),
    ]
    assert poses == [4, 2, 4, 1]
    assert buf.pad_with_zeros() == b"s\0\0\0"
    assert buf.pos == 0


def test_eager_set_data():
    buf = BlockBuffer(4)
    counter = {"n": 0}

    def gen(count):
        blocks = []
        for _ in range(count):
            blocks.append(bytes([counter["n"]]) * 4)
            counter["n"] += 1
        return blocks

    assert buf.set_data(6, gen) == bytes([0, 0, 0, 0, 1, 1])
    assert buf.pos == 2
    assert buf.set_data(3, gen) == bytes([1, 1, 2])
    assert buf.pos == 1
    assert buf.set_data(3, gen) == bytes([2, 2, 2])
    assert counter["n"] == 3
    assert buf.pos == 0


def _collect(pad):
    out = bytearray()
    pad(out.extend)
    return bytes(out)


def test_eager_paddings_len64_block8():
    length = 0x0001_0203_0405_0607
    buf_be = BlockBuffer(8, data=b"\x42")
    buf_le = buf_be.copy()
    out_be = _collect(lambda c: buf_be.len64_padding_be(length, c))
    out_le = _collect(lambda c: buf_le.len64_padding_le(length, c))
    assert out_be == bytes([
        0x42, 0x80, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07,
    ])
    assert out_le == bytes([
        0x42, 0x80, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x07, 0x06, 0x05, 0x04, 0x03, 0x02, 0x01, 0x00,
    ])
    assert buf_be.pos == 0


def test_eager_paddings_len64_block10():
    length = 0x0001_0203_0405_0607
    buf_be = BlockBuffer(10, data=b"\x42")
    buf_le = buf_be.copy()
    out_be = _collect(lambda c: buf_be.len64_padding_be(length, c))
    out_le = _collect(lambda c: buf_le.len64_padding_le(length, c))
    assert out_be == bytes([0x42, 0x80, 0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07])
    assert out_le == bytes([0x42, 0x80, 0x07, 0x06, 0x05, 0x04, 0x03, 0x02, 0x01, 0x00])


def test_eager_paddings_len128():
    length = 0x0001_0203_0405_0607_0809_0A0B_0C0D_0E0F
    buf = BlockBuffer(16, data=b"\x42")
    out = _collect(lambda c: buf.len128_padding_be(length, c))
    assert out == bytes([
        0x42, 0x80, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07,
        0x08, 0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x0E, 0x0F,
    ])

    buf = BlockBuffer(24, data=b"\x42")
    out = _collect(lambda c: buf.len128_padding_be(length, c))
    assert out == bytes([
        0x42, 0x80, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07,
        0x08, 0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x0E, 0x0F,
    ])


def test_digest_pad_custom():
    buf = BlockBuffer(4, data=b"\x42")
    out = _collect(lambda c: buf.digest_pad(0xFF, bytes([0x10, 0x11, 0x12]), c))
    assert out == bytes([0x42, 0xFF, 0x00, 0x00, 0x00, 0x10, 0x11, 0x12])

    buf = BlockBuffer(4, data=b"\x42")
    out = _collect(lambda c: buf.digest_pad(0xFF, bytes([0x10, 0x11]), c))
    assert out == bytes([0x42, 0xFF, 0x10, 0x11])


def test_digest_pad_suffix_too_long():
    buf = BlockBuffer(4)
    with pytest.raises(ValueError):
        buf.digest_pad(0x80, b"12345", lambda block: None)


def test_eager_only_operations_reject_lazy():
    buf = BlockBuffer(4, BufferKind.LAZY)
    with pytest.raises(TypeError):
        buf.digest_pad(0x80, b"", lambda block: None)
    with pytest.raises(TypeError):
        buf.set_data(3, lambda count: [])


def test_constructor_limits():
    with pytest.raises(ValueError):
        BlockBuffer(4, BufferKind.EAGER, b"1234")
    lazy = BlockBuffer(4, BufferKind.LAZY, b"1234")
    assert lazy.data == b"1234"
    assert lazy.remaining == 0
    with pytest.raises(ValueError):
        BlockBuffer(0)
    with pytest.raises(ValueError):
        BlockBuffer(256)


def test_state_accessors_and_reset():
    buf = BlockBuffer(8, data=b"abc")
    assert buf.size == 8
    assert buf.pos == 3
    assert buf.remaining == 5
    assert buf.data == b"abc"
    buf.reset()
    assert buf.pos == 0
    assert buf.data == b""


def test_set_replaces_content():
    buf = BlockBuffer(4)
    buf.set(b"wxyz", 2)
    assert buf.data == b"wx"
    with pytest.raises(ValueError):
        buf.set(b"wxyz", 4)
    with pytest.raises(ValueError):
        buf.set(b"wx", 1)


def test_copy_is_independent():
    buf = BlockBuffer(4, data=b"ab")
    clone = buf.copy()
    clone.digest_blocks(b"c", lambda blocks: None)
    assert clone.data == b"abc"
    assert buf.data == b"ab"


def test_set_data_rejects_wrong_blocks():
    buf = BlockBuffer(4)
    with pytest.raises(ValueError):
        buf.set_data(4, lambda count: [b"12"] * count)