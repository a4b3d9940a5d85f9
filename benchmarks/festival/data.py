# benchmarks/festival/data.py
#
# Random test data for the festival benchmarks: stages, each hosting exactly
# one musical genre, and artists whose stage follows from their genre. The
# random generator is always passed in so runs can be reproduced.

import os

import numpy as np

GENRES = [
    "Rock", "Jazz", "Pop", "Metal", "Hip-Hop", "Electro", "Classical", "Blues",
    "Reggae", "Folk", "Punk", "Techno", "Country", "Funk", "R&B", "Soul",
    "Gospel", "Ska", "House", "Latin",
]


def make_rng(seed=None) -> np.random.Generator:
    """Creates the generator used by the benchmarks, seeded from $ALGOBENCH_SEED if set."""
    if seed is None:
        env_seed = os.getenv("ALGOBENCH_SEED")
        seed = int(env_seed) if env_seed else None
    return np.random.default_rng(seed)


def generate_stages(count: int = 20) -> list:
    """
    Builds `count` stages named "Stage 1".."Stage N". Each stage gets a single
    genre of its own, so `count` may not exceed the number of known genres.
    """
    if count > len(GENRES):
        raise ValueError(f"Cannot build {count} stages with only {len(GENRES)} genres.")
    return [
        {"id": str(i + 1), "name": f"Stage {i + 1}", "genres": [GENRES[i]]}
        for i in range(count)
    ]


def generate_artists(count: int, stages: list, rng: np.random.Generator) -> list:
    """
    Builds `count` artists with a random genre drawn from the given stages.
    The expected stage id is filled in from the genre.

    The list is sorted by artist name, which the binary search relies on.
    """
    genre_to_stage = {genre: stage["id"] for stage in stages for genre in stage["genres"]}
    genres = list(genre_to_stage)
    picks = rng.integers(0, len(genres), size=count)
    artists = [
        {
            "id": str(i + 1),
            "name": f"Artist {i + 1}",
            "genre": genres[pick],
            "stage": genre_to_stage[genres[pick]],
        }
        for i, pick in enumerate(picks)
    ]
    artists.sort(key=lambda artist: artist["name"])
    return artists
