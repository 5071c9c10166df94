from parsez import char, code_frame, parser, result, stream, string
from parsez.errors import GrammarError, ParseFailed
from parsez.opt import opt
from parsez.parser import Parser
from parsez.result import ParseError, ParseSuccess
from parsez.stream import Stream

__version__ = '0.1.0'
