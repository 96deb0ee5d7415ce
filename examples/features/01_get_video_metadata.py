# examples/features/01_get_video_metadata.py

from rich.pretty import pprint

from yt_fastmeta import YtFastMeta

# --- 1. Initialize the client ---
# You only need to create one instance of the client for your application.
client = YtFastMeta()

# --- 2. Define the video URL ---
video_url = "https://www.youtube.com/watch?v=B68agR-OeJM"

# --- 3. Fetch the metadata ---
# With no `fields` argument every field is scraped.
print(f"Fetching metadata for video: {video_url}\n")
video_meta = client.get_video_metadata(video_url)

# --- 4. Print the results ---
pprint(video_meta.to_dict())
