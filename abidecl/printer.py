from termcolor import colored
from abidecl.models import *
from abidecl.formatter import format_entry

KIND_NAMES = {
    Function: "function",
    Constructor: "constructor",
    Event: "event",
}

KIND_COLORS = {
    Function: "blue",
    Constructor: "yellow",
    Event: "green",
}

class Printer:
    def __init__(self, selectors=False, color=True):
        self.selectors = selectors
        self.color = color

    def paint(self, text, color=None, attrs=None):
        if not self.color:
            return text
        return colored(text, color, attrs=attrs)

    def show_entry(self, entry):
        kind = KIND_NAMES[type(entry)]
        text = format_entry(entry)
        line = self.paint(kind, KIND_COLORS[type(entry)])
        if type(entry) is Constructor:
            line += text[len(kind):]
        else:
            name, paren, params = text[len(kind) + 1:].partition("(")
            line += " " + self.paint(name, attrs=["bold"]) + paren + params
        if self.selectors:
            if type(entry) is Function:
                line += " " + self.paint(entry.selector, "cyan")
            elif type(entry) is Event and entry.topic:
                line += " " + self.paint(entry.topic, "cyan")
        return line

    def show_abi(self, abi):
        return [self.show_entry(x) for x in abi]

    def print_abi(self, abi, title=None):
        if title:
            print(self.paint(title, "magenta", ["bold"]))
        for line in self.show_abi(abi):
            print("    " + line)
