"""Expected demonstration transcript shared by the end-to-end tests."""

from __future__ import annotations

EXPECTED_OUTPUT = """\
'Old style' approach to varargs
Number of arguments: 1
5
Number of arguments: 3
1 2 3
Number of arguments: 0

Varargs approach
Number of arguments: 1
5
Number of arguments: 3
1 2 3
Number of arguments: 0

Multiple parameters including varargs
a = 1
b = 2
Number of arguments: 3
1 2 3

Overloading varargs
varargs_test3 with int as parameter
No. of args: 3
Args contents: 1 2 3

varargs_test3 with boolean as parameter
No. of args: 3
Args contents: True True False

varargs_test3 with String & int varargs as parameter
String contents: Varargs test
No. of args: 2
Args contents: 5 10

"""
