# -*- coding: utf-8 -*-
"""Creates a larger dummy catalog for trying the client."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from watch.data.catalog import Catalog
from watch.domain.models import Creator, Video, VideoInformation
from watch.utils.file_utils import write_json_file

TOPICS = ["Cooking", "Woodwork", "Travel", "Music", "Gardening"]


def create_mock_catalog(base_dir: Path, videos_per_creator: int = 4) -> Path:
    creators = {}
    videos = []
    for topic in TOPICS:
        creator = Creator(
            id=topic.lower(),
            name=f"{topic} Channel",
            description=f"Everything about {topic.lower()}",
        )
        creators[creator.id] = creator
        for index in range(1, videos_per_creator + 1):
            video = Video(
                id=f"{creator.id}-{index}",
                title=f"{topic} episode {index}",
                content_url=f"https://videos.example.test/{creator.id}/{index}.mp4",
                description=f"Part {index} of the {topic.lower()} series",
            )
            videos.append(VideoInformation(video=video, creator=creator))

    catalog = Catalog(creators=creators, videos=videos, home_ids=[item.video.id for item in videos[::3]])
    path = write_json_file(base_dir / "mock_catalog.json", catalog.to_dict())
    print(f"Created mock catalog at: {path.absolute()}")
    return path


if __name__ == "__main__":
    create_mock_catalog(Path.cwd())
