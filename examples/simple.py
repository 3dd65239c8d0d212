import sys

from tokensplit import WHITESPACE, Splitter, tokenize, tokenize_spans

# Default mode drops trailing empty fields
sys.stdout.write(repr(tokenize("a,b,c,", ",")) + "\n")  # ['a', 'b', 'c']

# -1 keeps them
sys.stdout.write(repr(tokenize("a,b,c,", ",", -1)) + "\n")  # ['a', 'b', 'c', '']

# A positive limit leaves the rest of the input in the last token
sys.stdout.write(repr(tokenize("2013-04-05 14:39", {"-", " "}, 2)) + "\n")  # ['2013', '04-05 14:39']

# Offsets of whitespace-separated fields
for token in tokenize_spans("field1    field2 field3   ", WHITESPACE):
    sys.stdout.write(f"{token.text} [{token.start}:{token.end}]\n")

# Reuse one configuration across lines
kv = Splitter("=", limit=2)
for line in ["host=db.local", "opts=a=1,b=2", "flag"]:
    sys.stdout.write(repr(kv.split(line)) + "\n")
