import unittest
from binstr.bit_buffer import BitBuffer
from binstr.bit_utils import uint_chunks
from binstr.errors import CapacityError

class TestBitBuffer(unittest.TestCase):
    def test_write_within_byte(self):
        b = BitBuffer(bytearray(1))
        b.write_bits(0,0b101,3)
        b.write_bits(3,0b11,2)
        self.assertEqual(bytes(b),b'\xb8')

    def test_write_straddles_bytes(self):
        b = BitBuffer(bytearray(2))
        b.write_bits(5,0xff,8)
        self.assertEqual(bytes(b),b'\x07\xf8')

    def test_bits_outside_span_are_preserved(self):
        b = BitBuffer(bytearray(b'\xff\xff'))
        b.write_bits(4,0,6)
        self.assertEqual(bytes(b),b'\xf0\x3f')
        b.write_bits(0,0b1010,4)
        self.assertEqual(bytes(b),b'\xa0\x3f')

    def test_value_is_masked_to_length(self):
        b = BitBuffer(bytearray(1))
        b.write_bits(0,0x1f3,2)
        self.assertEqual(bytes(b),b'\xc0')

    def test_zero_length_is_noop(self):
        b = BitBuffer(bytearray(b'\x5a'))
        b.write_bits(8,0xff,0)
        b.write_bits(3,0xff,0)
        self.assertEqual(bytes(b),b'\x5a')

    def test_capacity(self):
        b = BitBuffer(bytearray(4),capacity=1)
        self.assertEqual(len(b),8)
        b.write_bits(0,0xff,8)
        with self.assertRaises(CapacityError):
            b.write_bits(7,0b11,2)
        #a failed write does not modify anything
        self.assertEqual(bytes(b.buf),b'\xff\x00\x00\x00')

    def test_invalid_arguments(self):
        b = BitBuffer(bytearray(2))
        with self.assertRaises(ValueError):
            b.write_bits(0,0x1ff,9)
        with self.assertRaises(ValueError):
            b.write_bits(-1,1,1)
        with self.assertRaises(TypeError):
            BitBuffer(b'\x00')
        with self.assertRaises(TypeError):
            BitBuffer(memoryview(b'\x00'))
        with self.assertRaises(ValueError):
            BitBuffer(bytearray(1),capacity=2)

    def test_memoryview(self):
        data = bytearray(3)
        b = BitBuffer(memoryview(data)[1:])
        b.write_bits(4,0xf,4)
        self.assertEqual(data,bytearray(b'\x00\x0f\x00'))

    def test_owned_buffer(self):
        b = BitBuffer(capacity=3)
        self.assertEqual(bytes(b),b'\x00\x00\x00')

    def test_pad(self):
        b = BitBuffer(bytearray(b'\xff\xff'))
        self.assertEqual(b.pad(0),0)
        self.assertEqual(b.pad(9),7)
        self.assertEqual(bytes(b),b'\xff\x80')
        self.assertEqual(b.pad(16),0)

class TestUintChunks(unittest.TestCase):
    def test_chunks_are_msb_first(self):
        self.assertEqual(list(uint_chunks(0xabcd,16)),[(0xab,8),(0xcd,8)])
        self.assertEqual(list(uint_chunks(0xabcd,12)),[(0xbc,8),(0xd,4)])
        self.assertEqual(list(uint_chunks(0b101,3,chunk_bits=1)),[(1,1),(0,1),(1,1)])

if __name__ == '__main__':
    unittest.main()
