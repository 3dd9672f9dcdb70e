from dataclasses import dataclass, field
from typing import IO, List

from ..models.errors import InputError


@dataclass
class ParsedInput:
    text: str
    patterns: List[str] = field(default_factory=list)


class Parser:
    """
    Reads a multiple pattern matching input file: the text on the first
    line, then patterns, one or more per line separated by whitespace.
    """
    def __init__(self, inputFile: IO): 
        self.inputFile = inputFile

    def parseText(self) -> str:
        line = self.inputFile.readline()
        if not line:
            raise InputError("Input is empty, expected a text on the first line")
        # removing the newline characters if applicable
        return line.rstrip('\r\n')

    def parsePatterns(self) -> List[str]:
        patterns: List[str] = []
        for line in self.inputFile:
            # blank lines hold no pattern
            patterns.extend(line.split())
        return patterns

    def parseInput(self) -> ParsedInput:
        text = self.parseText()
        return ParsedInput(text=text, patterns=self.parsePatterns())
