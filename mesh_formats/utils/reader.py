import os
import io
import struct


class BinaryReader(object):

	def __init__(self, stream):
		if isinstance(stream, (bytes, bytearray)):
			self.stream = io.BytesIO(stream)
		else:
			self.stream = stream

	def seek(self, offset, whence=os.SEEK_SET):
		return self.stream.seek(offset, whence)

	def tell(self):
		return self.stream.tell()

	def unpack(self, fmt, length=1):
		data = self.stream.read(length)
		if len(data) != length:
			raise EOFError(F"Expected {length} bytes but only {len(data)} remain in the stream")
		return struct.unpack(fmt, data)

	def read_bytes(self, length):
		return self.stream.read(length)

	def read_uint8(self, endian='<'):
		return self.unpack(f'{endian}B')[0]

	def read_uint16(self, endian='<'):
		return self.unpack(f'{endian}H', 2)[0]

	def read_uint32(self, endian='<'):
		return self.unpack(f'{endian}I', 4)[0]

	def read_vec2(self, endian='<'):
		return self.unpack(f'{endian}2f', 8)

	def read_vec3(self, endian='<'):
		return self.unpack(f'{endian}3f', 12)

	def read_string(self, encoding='utf-8', endian='<'):
		length = self.read_uint32(endian)
		data = self.read_bytes(length)
		if len(data) != length:
			raise EOFError(F"Expected a string of {length} bytes but only {len(data)} remain in the stream")
		return data.decode(encoding)
