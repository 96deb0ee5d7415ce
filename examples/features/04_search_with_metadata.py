# examples/features/04_search_with_metadata.py

from yt_fastmeta import FieldSelection, YtFastMeta, parse_upload_date

client = YtFastMeta()

# This makes one extra request per search result.
fields = FieldSelection(title=True, channel=True, upload_date=True)
for video in client.search_with_metadata("lofi", limit=3, fields=fields):
    print(f"Title: {video.title}")
    print(f"Channel: {video.channel}")
    print(f"Uploaded: {video.upload_date} ({parse_upload_date(video.upload_date)})")
    print(f"URL: {video.url}")
    print("-" * 10)
