"""
Grammar for dotted field paths.

A path is one or more segments separated by '.'; a segment is any run of
characters other than '.', including the empty run, so 'a..b' has three
segments. Whitespace is significant.
"""
import pyparsing as pp

dot = pp.Suppress('.').leave_whitespace()
segment = pp.Regex(r'[^.]*').leave_whitespace()

path = (segment + pp.ZeroOrMore(dot + segment)).leave_whitespace().parse_with_tabs()
