from .classify import (
    Kind,
    classify,
    is_fragment,
    is_mergeable_collection,
    is_raw_input,
)
from .compose import concat, flatten, frag, join
from .dump import Dumper, DumpSink, create_dump, dump, dump_log
from .error import MissingValueError, SeglitError, TemplateSyntaxError
from .fragment import EMPTY, Fragment
from .template import RawLiteral, fmt, parse
