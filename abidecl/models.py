from web3 import Web3

class Value:
    _fields = ()

    def __setattr__(self, name, value):
        if name not in self._fields or name in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.{name} can not be changed")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__}.{name} can not be deleted")

    def fields(self):
        return tuple(getattr(self, k) for k in self._fields)

    def __eq__(self, other):
        return type(self) is type(other) and self.fields() == other.fields()

    def __hash__(self):
        return hash((type(self).__name__,) + self.fields())

    def __repr__(self):
        args = ", ".join(repr(v) for v in self.fields())
        return f"{type(self).__name__}({args})"

class Int(Value):
    _fields = ("size",)

    def __init__(self, size):
        self.size = size

class Uint(Value):
    _fields = ("size",)

    def __init__(self, size):
        self.size = size

class FixedBytes(Value):
    _fields = ("size",)

    def __init__(self, size):
        self.size = size

class Bool(Value):
    pass

class Address(Value):
    pass

class Bytes(Value):
    pass

class String(Value):
    pass

class FixedArray(Value):
    _fields = ("element_type", "length")

    def __init__(self, element_type, length):
        self.element_type = element_type
        self.length = length

class Array(Value):
    _fields = ("element_type",)

    def __init__(self, element_type):
        self.element_type = element_type

class IndexedValue(Value):
    _fields = ("name", "var_type", "indexed")

    def __init__(self, name, var_type, indexed):
        self.name = name
        self.var_type = var_type
        self.indexed = indexed

def keccak_hex(text, length=32):
    return "0x" + bytes(Web3.keccak(text=text))[:length].hex()

class Function(Value):
    _fields = ("name", "inputs", "outputs", "constant")

    def __init__(self, name, inputs, outputs, constant):
        self.name = name
        self.inputs = tuple(inputs)
        self.outputs = tuple(outputs)
        self.constant = constant

    @property
    def signature(self):
        from abidecl.formatter import format_signature
        return format_signature(self.name, self.inputs)

    @property
    def selector(self):
        return keccak_hex(self.signature, 4)

class Constructor(Value):
    _fields = ("inputs",)

    def __init__(self, inputs):
        self.inputs = tuple(inputs)

class Event(Value):
    _fields = ("name", "anonymous", "inputs")

    def __init__(self, name, anonymous, inputs):
        self.name = name
        self.anonymous = anonymous
        self.inputs = tuple(inputs)

    @property
    def signature(self):
        from abidecl.formatter import format_signature
        return format_signature(self.name, [x.var_type for x in self.inputs])

    @property
    def topic(self):
        # anonymous events do not emit their signature as topic 0
        if self.anonymous:
            return None
        return keccak_hex(self.signature)

class Abi(Value):
    _fields = ("entries",)

    def __init__(self, entries):
        self.entries = tuple(entries)

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __getitem__(self, idx):
        return self.entries[idx]

    @property
    def functions(self):
        return [x for x in self.entries if type(x) is Function]

    @property
    def events(self):
        return [x for x in self.entries if type(x) is Event]

    @property
    def constructor(self):
        for x in self.entries:
            if type(x) is Constructor:
                return x

    @property
    def functions_by_name(self):
        return group_by_name(self.functions)

    @property
    def events_by_name(self):
        return group_by_name(self.events)

def group_by_name(entries):
    res = {}
    for x in entries:
        res.setdefault(x.name, []).append(x)
    return {name: tuple(xs) for name, xs in res.items()}
