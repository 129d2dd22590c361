"""Thread safe: render 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from stackdown import Markdown

md = Markdown(soft_break="<br />")
docs = ["# Doc " + str(i) + "\n\nContent for\ndocument " + str(i) + "\n" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(md, docs))

print(f"Rendered {len(results)} documents in parallel")
print("First doc:", results[0])
