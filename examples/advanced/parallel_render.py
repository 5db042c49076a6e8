"""Thread safe: render 1000 docs in parallel with one shared Markdown instance."""

from concurrent.futures import ThreadPoolExecutor

from tuimark import Markdown

docs = ["# Doc " + str(i) + "\n\nContent for document " + str(i) for i in range(1000)]
md = Markdown()

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(md, docs))

print(f"Rendered {len(results)} documents in parallel")
print("First doc lines:", results[0].plain_lines())
print("Last doc height:", results[-1].height)
