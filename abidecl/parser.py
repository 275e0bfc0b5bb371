import regex
from abidecl.models import *

class ParsingFailed(Exception):
    def __init__(self, text, position, message=None):
        self.text = text
        self.position = position
        if message is None:
            message = f"unexpected input {text[position:]!r} at position {position}"
        self.message = message
        super().__init__(f"Can not parse type {text!r}: {message}")

class TypeParser:
    def __init__(self, s):
        if not isinstance(s, str):
            raise ParsingFailed(repr(s), 0, f"expected a string, got {type(s).__name__}")
        self.s = s
        self.pos = 0

    def parse(self):
        res = self.parse_type()
        if len(self.s) != self.pos:
            raise ParsingFailed(self.s, self.pos)
        return res

    def parse_type(self):
        start = self.pos
        basic = self.parse_basic()
        if basic is None:
            raise ParsingFailed(self.s, start)

        if self.match_literal("[]"):
            return Array(basic)

        pos = self.pos
        if self.match_literal("["):
            length = self.parse_digits()
            if length is not None and self.match_literal("]"):
                return FixedArray(basic, length)
            self.pos = pos

        return basic

    def parse_basic(self):
        for alternative in [
                self.parse_uint,
                self.parse_int,
                self.parse_address,
                self.parse_bool,
                self.parse_string,
                self.parse_fixed_bytes,
                self.parse_bytes]:
            pos = self.pos
            res = alternative()
            if res is not None:
                return res
            self.pos = pos

    def parse_uint(self):
        if self.match_literal("uint"):
            size = self.parse_digits()
            if size is not None:
                return Uint(size)

    def parse_int(self):
        if self.match_literal("int"):
            size = self.parse_digits()
            if size is not None:
                return Int(size)

    def parse_address(self):
        if self.match_literal("address"):
            return Address()

    def parse_bool(self):
        if self.match_literal("bool"):
            return Bool()

    def parse_string(self):
        if self.match_literal("string"):
            return String()

    def parse_fixed_bytes(self):
        if self.match_literal("bytes"):
            size = self.parse_digits()
            if size is not None:
                return FixedBytes(size)

    def parse_bytes(self):
        if self.match_literal("bytes"):
            return Bytes()

    def parse_digits(self):
        m = regex.match("[0-9]+", self.s[self.pos:])
        if m:
            try:
                value = int(m.group(0))
            except ValueError:
                raise ParsingFailed(self.s, self.pos, f"invalid number {m.group(0)!r}")
            self.pos += len(m.group(0))
            return value

    def match_literal(self, literal):
        if self.s.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

def parse_type(s):
    return TypeParser(s).parse()
