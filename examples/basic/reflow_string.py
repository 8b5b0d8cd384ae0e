"""Reflow a Lua snippet in one call — no config, no deps."""

from luaflow import reflow

print(reflow("local x=1 print(x) if x then return x end"), end="")
