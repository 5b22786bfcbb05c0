"""Write typescript.html and haskell.html demo pages to the current directory."""

from pathlib import Path

from hashlight import highlight, wrap_document

EXAMPLE_TYPESCRIPT = """
function shuffle<T>(array: T[]): T[] {
  let currentIndex = array.length,
    temporaryValue: T,
    randomIndex: number;

  // While there remain elements to shuffle...
  while (0 !== currentIndex) {
    // Pick a remaining element...
    randomIndex = Math.floor(Math.random() * currentIndex);
    currentIndex -= 1;

    // And swap it with the current element.
    temporaryValue = array[currentIndex];
    array[currentIndex] = array[randomIndex];
    array[randomIndex] = temporaryValue;
  }

  return array;
}
"""

EXAMPLE_HASKELL = """
-- | The 'foldl' function folds the list from the left,
-- and is tail-recursive.
foldl            :: (a -> b -> a) -> a -> [b] -> a
foldl f z []     =  z
foldl f z (x:xs) =  foldl f (f z x) xs
"""

for filename, code, flag in [
    ("typescript.html", EXAMPLE_TYPESCRIPT, "ts"),
    ("haskell.html", EXAMPLE_HASKELL, "hs"),
]:
    Path(filename).write_text(wrap_document(highlight(code, flag)), encoding="utf-8")
    print(f"wrote {filename}")
