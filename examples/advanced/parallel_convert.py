"""Thread safe: convert 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from marklite import convert

docs = ["# Doc " + str(i) + "\n\nContent for document " + str(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(convert, docs))

print(f"Converted {len(results)} documents in parallel")
print("First doc:", results[0])
