import json
from abidecl.models import *
from abidecl.parser import ParsingFailed, parse_type

class DecodingFailed(Exception):
    def __init__(self, path, message, cause=None):
        self.path = path
        self.message = message
        self.cause = cause
        super().__init__(f"{path or '<root>'}: {message}")

def shape_name(node):
    if node is None:
        return "null"
    if isinstance(node, bool):
        return "bool"
    if isinstance(node, (int, float)):
        return "number"
    if isinstance(node, str):
        return "string"
    if isinstance(node, (list, tuple)):
        return "array"
    if isinstance(node, dict):
        return "object"
    return type(node).__name__

class AbiLoader:
    def __init__(self, document):
        self.document = document
        self.loaders = {
            "function": self.parse_function,
            "constructor": self.parse_constructor,
            "event": self.parse_event,
        }

    def load(self):
        entries = []
        for i, node in enumerate(self.expect(self.document, "array", "")):
            entries.append(self.parse_entry(node, f"[{i}]"))
        return Abi(entries)

    def parse_entry(self, node, path):
        self.expect(node, "object", path)
        entry_type = self.get_string(node, "type", path)
        loader = self.loaders.get(entry_type)
        if loader is None:
            raise DecodingFailed(self.field_path(path, "type"), f"unknown entry type {entry_type!r}")
        return loader(node, path)

    def parse_function(self, node, path):
        self.expect(node, "object", path)
        name = self.get_string(node, "name", path)
        inputs = self.parse_param_types(node, "inputs", path)
        outputs = self.parse_param_types(node, "outputs", path)
        constant = self.get_bool(node, "constant", path)
        return Function(name, inputs, outputs, constant)

    def parse_constructor(self, node, path):
        self.expect(node, "object", path)
        inputs = self.parse_param_types(node, "inputs", path)
        return Constructor(inputs)

    def parse_event(self, node, path):
        self.expect(node, "object", path)
        name = self.get_string(node, "name", path)
        anonymous = self.get_bool(node, "anonymous", path)
        inputs = []
        for i, x in enumerate(self.get_array(node, "inputs", path)):
            inputs.append(self.parse_indexed_value(x, f"{path}.inputs[{i}]"))
        return Event(name, anonymous, inputs)

    def parse_indexed_value(self, node, path):
        self.expect(node, "object", path)
        name = self.get_string(node, "name", path)
        var_type = self.parse_param_type(node, path)
        indexed = self.get_bool(node, "indexed", path)
        return IndexedValue(name, var_type, indexed)

    def parse_param_types(self, node, key, path):
        res = []
        for i, x in enumerate(self.get_array(node, key, path)):
            item_path = f"{self.field_path(path, key)}[{i}]"
            self.expect(x, "object", item_path)
            res.append(self.parse_param_type(x, item_path))
        return res

    def parse_param_type(self, node, path):
        type_str = self.get_string(node, "type", path)
        try:
            return parse_type(type_str)
        except ParsingFailed as e:
            raise DecodingFailed(
                    self.field_path(path, "type"),
                    f"invalid type {type_str!r} ({e.message})",
                    e) from e

    def get_string(self, node, key, path):
        return self.expect(self.get_field(node, key, path), "string", self.field_path(path, key))

    def get_bool(self, node, key, path):
        return self.expect(self.get_field(node, key, path), "bool", self.field_path(path, key))

    def get_array(self, node, key, path):
        return self.expect(self.get_field(node, key, path), "array", self.field_path(path, key))

    def get_field(self, node, key, path):
        if key not in node:
            raise DecodingFailed(self.field_path(path, key), "missing required field")
        return node[key]

    def expect(self, node, shape, path):
        actual = shape_name(node)
        if actual != shape:
            raise DecodingFailed(path, f"expected {shape}, got {actual}")
        return node

    def field_path(self, path, key):
        if path:
            return f"{path}.{key}"
        return key

def load_abi(document):
    return AbiLoader(document).load()

def load_contracts(data):
    checker = AbiLoader(data)
    checker.expect(data, "object", "")
    contracts = {}
    for key, contract_data in checker.expect(data.get('contracts', {}), "object", "contracts").items():
        checker.expect(contract_data, "object", key)
        abi = contract_data.get('abi')
        if abi is None:
            continue
        # solc before 0.8 emits the abi as an embedded json string
        if isinstance(abi, str):
            try:
                abi = json.loads(abi)
            except ValueError as e:
                raise DecodingFailed(f"{key}.abi", f"invalid embedded json ({e})") from e
        try:
            contracts[key] = load_abi(abi)
        except DecodingFailed as e:
            raise DecodingFailed(f"{key}{e.path}", e.message, e.cause) from e
    return contracts

def contract_name(key):
    return key.split(":")[-1]
