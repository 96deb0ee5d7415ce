# examples/features/02_select_fields.py

from rich.pretty import pprint

from yt_fastmeta import MetadataNotFoundError, YtFastMeta, parse_fields

client = YtFastMeta()
video_url = "https://www.youtube.com/watch?v=jNQXAC9IVRw"  # "Me at the zoo"

# Only the requested fields are scraped; everything else stays None.
fields = parse_fields("title, views")

try:
    video_meta = client.get_video_metadata(video_url, fields=fields)
    pprint(video_meta.to_dict())
except MetadataNotFoundError:
    print("Neither the title nor the view count could be found on the page.")
