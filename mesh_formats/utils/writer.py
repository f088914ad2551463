import io
import struct


class BinaryWriter(object):

	def __init__(self, stream=None):
		if stream is None:
			self.stream = io.BytesIO()
		elif isinstance(stream, (bytes, bytearray)):
			self.stream = io.BytesIO(stream)
		else:
			self.stream = stream

	def write_bytes(self, value):
		return self.stream.write(value)

	def pack(self, fmt, *data):
		return self.write_bytes(struct.pack(fmt, *data))

	def write_uint8(self, value, endian='<'):
		return self.pack(f'{endian}B', value)

	def write_uint16(self, value, endian='<'):
		return self.pack(f'{endian}H', value)

	def write_uint32(self, value, endian='<'):
		return self.pack(f'{endian}I', value)

	def write_vec2(self, value, endian='<'):
		return self.pack(f'{endian}2f', *value)

	def write_vec3(self, value, endian='<'):
		return self.pack(f'{endian}3f', *value)

	def write_string(self, value, encoding='utf-8', endian='<'):
		if type(value) is str:
			value = value.encode(encoding)
		self.write_uint32(len(value), endian)
		return self.write_bytes(value)

	def getvalue(self):
		return self.stream.getvalue()
