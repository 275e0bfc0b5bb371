import unittest
from abidecl.models import *
from abidecl.formatter import format_entry, format_signature, format_type
from abidecl.parser import parse_type

BASIC_TYPES = [
    Bool(), Address(), String(), Bytes(),
    Uint(8), Uint(256), Int(8), Int(128), FixedBytes(1), FixedBytes(32),
]

class TestFormatter(unittest.TestCase):
    def test_format_type(self):
        self.assertEqual(format_type(Bool()), "bool")
        self.assertEqual(format_type(Address()), "address")
        self.assertEqual(format_type(Uint(256)), "uint256")
        self.assertEqual(format_type(Int(8)), "int8")
        self.assertEqual(format_type(String()), "string")
        self.assertEqual(format_type(FixedBytes(32)), "bytes32")
        self.assertEqual(format_type(Bytes()), "bytes")
        self.assertEqual(format_type(FixedArray(Uint(8), 4)), "uint8[4]")
        self.assertEqual(format_type(Array(Address())), "address[]")

    def test_format_inverts_parse(self):
        for n in range(0, 300):
            self.assertEqual(format_type(parse_type(f"uint{n}")), f"uint{n}")
            self.assertEqual(format_type(parse_type(f"int{n}")), f"int{n}")

    def test_parse_inverts_format(self):
        types = list(BASIC_TYPES)
        for t in BASIC_TYPES:
            types.append(Array(t))
            types.append(FixedArray(t, 3))
        for t in types:
            self.assertEqual(parse_type(format_type(t)), t)

    def test_not_a_type(self):
        with self.assertRaises(TypeError):
            format_type("uint256")

    def test_format_signature(self):
        self.assertEqual(format_signature("f", []), "f()")
        self.assertEqual(format_signature("transfer", [Address(), Uint(256)]), "transfer(address,uint256)")

    def test_format_entry(self):
        f = Function("transfer", [Address(), Uint(256)], [Bool()], False)
        self.assertEqual(format_entry(f), "function transfer(address,uint256) returns (bool)")
        f = Function("count", [], [Uint(256)], True)
        self.assertEqual(format_entry(f), "function count() returns (uint256) constant")
        self.assertEqual(format_entry(Constructor([Address()])), "constructor(address)")
        e = Event("Transfer", True, [
            IndexedValue("from", Address(), True),
            IndexedValue("value", Uint(256), False)])
        self.assertEqual(format_entry(e), "event Transfer(address indexed,uint256) anonymous")
