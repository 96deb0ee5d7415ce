# examples/features/03_search_videos.py

from yt_fastmeta import YtFastMeta

client = YtFastMeta()

query = "lofi chill"
print(f"Searching for: {query}\n")

# Only the first results page is used, so fewer URLs may come back.
for url in client.search(query, limit=5):
    print(url)
