from abc import ABC, abstractmethod
import io
from typing import BinaryIO, Tuple


class Compressor(ABC):
    """
    Stream compressor interface. Both operations return log text.
    Keyword arguments of the helpers go to the constructor.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        pass

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        pass

    @classmethod
    def compress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        compressor = cls(**kwargs)
        with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
            return compressor.compress(in_file, out_file)

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        compressor = cls(**kwargs)
        with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
            return compressor.decompress(in_file, out_file)

    @classmethod
    def compress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """Returns (compressed data, log text)."""
        compressor = cls(**kwargs)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """Returns (decompressed data, log text)."""
        compressor = cls(**kwargs)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue(), log_info
