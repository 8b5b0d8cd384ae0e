"""Look at the logical lines and their indentation deltas."""

from luaflow import build_document, tokenize

source = "function f(a, b) return a end print(f(1, 2))"
for line in build_document(tokenize(source)):
    print(f"{line.delta:+d}  {line.text}")
