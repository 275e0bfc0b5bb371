from abidecl.models import *

BASIC_NAMES = {
    Bool: "bool",
    Address: "address",
    String: "string",
    Bytes: "bytes",
}

SIZED_NAMES = {
    Uint: "uint",
    Int: "int",
    FixedBytes: "bytes",
}

def format_type(var_type):
    t = type(var_type)
    if t in BASIC_NAMES:
        return BASIC_NAMES[t]
    if t in SIZED_NAMES:
        return SIZED_NAMES[t] + str(var_type.size)
    if t is FixedArray:
        return f"{format_type(var_type.element_type)}[{var_type.length}]"
    if t is Array:
        return f"{format_type(var_type.element_type)}[]"
    raise TypeError(f"Not a solidity type: {var_type!r}")

def format_signature(name, types):
    return name + "(" + ",".join(format_type(x) for x in types) + ")"

def format_entry(entry):
    t = type(entry)
    if t is Function:
        res = "function " + format_signature(entry.name, entry.inputs)
        if entry.outputs:
            res += " returns (" + ",".join(format_type(x) for x in entry.outputs) + ")"
        if entry.constant:
            res += " constant"
        return res
    if t is Constructor:
        return format_signature("constructor", entry.inputs)
    if t is Event:
        params = []
        for x in entry.inputs:
            param = format_type(x.var_type)
            if x.indexed:
                param += " indexed"
            params.append(param)
        res = "event " + entry.name + "(" + ",".join(params) + ")"
        if entry.anonymous:
            res += " anonymous"
        return res
    raise TypeError(f"Not an abi entry: {entry!r}")
