"""A simulated stream whose reads, writes, seeks and closes can be made to fail."""

from chkkit.errors import ForcedOutOfSpaceError, ReadPastEndOfDataError


class SimulatedIO:
    """In-memory reader, writer, seeker and closer with scriptable failures.

    ``last_count`` holds the byte count or position reported by the most
    recent read, write or seek, including when that operation raised.
    """

    def __init__(self):
        self.last_count = 0
        self._close_err = None

        self._r_data = b""
        self._r_pos = 0
        self._r_left = 0
        self._r_err_pos = -1
        self._r_err = None
        self._forced_read = None

        self._w_data = bytearray()
        self._w_err_pos = -1
        self._w_err = None
        self._forced_write = None

        self._forced_seek = None

    # Closing.

    def set_close_error(self, err):
        """Make the next close raise err."""
        self._close_err = err

    def close(self):
        """Raise the primed close error once, if any."""
        err, self._close_err = self._close_err, None
        if err is not None:
            raise err

    # Reading.

    def set_reader_data(self, *args):
        """Load the data the reader will return and clear any reader error."""
        self._r_data = b"".join(
            a.encode() if isinstance(a, str) else bytes(a) for a in args
        )
        self._r_left = len(self._r_data)
        self._r_pos = 0
        self._r_err_pos = -1
        self._r_err = None

    def set_reader_error(self, byte_count, err):
        """Raise err once byte_count more bytes have been read."""
        self._r_err_pos = byte_count
        self._r_err = err

    def set_read_error(self, count, err):
        """Make the next read report count bytes and raise err if given."""
        self._forced_read = (count, err)

    def _read_error_due(self):
        return self._r_err is not None and (self._r_err_pos <= 0 or self._r_left <= 0)

    def read(self, size=-1):
        """Return up to size bytes; b"" signals end of data."""
        if self._forced_read is not None:
            count, err = self._forced_read
            self._forced_read = None
            self.last_count = count
            if err is not None:
                raise err
            return bytes(count)

        self.last_count = 0
        if self._read_error_due():
            raise self._r_err
        if self._r_left <= 0:
            self._r_err = ReadPastEndOfDataError()
            return b""

        count = self._r_left if size is None or size < 0 else min(size, self._r_left)
        if self._r_err is not None:
            count = min(count, self._r_err_pos)
        chunk = self._r_data[self._r_pos:self._r_pos + count]
        self._r_pos += count
        self._r_left -= count
        self._r_err_pos -= count
        self.last_count = count
        return chunk

    # Writing.

    def set_writer_error(self, limit, err):
        """Accept only limit more bytes, then raise err; clears written data."""
        self._w_err_pos = limit
        self._w_err = err
        self._w_data = bytearray()

    def set_write_error(self, count, err):
        """Make the next write report count bytes and raise err if given."""
        self._forced_write = (count, err)

    def write(self, data):
        """Store data and return the number of bytes accepted."""
        if self._forced_write is not None:
            count, err = self._forced_write
            self._forced_write = None
            self.last_count = count
            if err is not None:
                raise err
            return count

        self.last_count = 0
        if self._w_err is not None and self._w_err_pos <= 0:
            raise self._w_err

        data = bytes(data)
        room = len(data) if self._w_err_pos < 0 else min(len(data), self._w_err_pos)
        self._w_data += data[:room]
        if self._w_err_pos >= 0:
            self._w_err_pos -= room
        self.last_count = room
        if room < len(data):
            raise self._w_err if self._w_err is not None else ForcedOutOfSpaceError()
        return room

    def writer_data(self):
        """Return every byte accepted by write so far."""
        return bytes(self._w_data)

    # Seeking.

    def set_seek_error(self, pos, err):
        """Make the next seek report pos and raise err if given."""
        self._forced_seek = (pos, err)

    def seek(self, offset, whence=0):
        """Return the primed position (0 when none) or raise the primed error."""
        pos, err = self._forced_seek if self._forced_seek is not None else (0, None)
        self._forced_seek = None
        self.last_count = pos
        if err is not None:
            raise err
        return pos