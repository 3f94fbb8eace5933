from typing import Any, Dict, List

# Contacts loaded into every new store.
SEED_CONTACTS: List[Dict[str, Any]] = [
    {
        "id": "6f1c2a3e-8d1b-4f4e-9c55-0a1f7b2d3e41",
        "name": "Idris Elba",
        "pictureUrl": "https://image.tmdb.org/t/p/w500/be1bVF7qGX91a6c5WeRPs5pKXln.jpg",
        "popularity": 11.622713,
    },
    {
        "id": "0b7e4d92-5a6c-4c1f-8f3a-2e9d1c7b6a58",
        "name": "Johnny Depp",
        "pictureUrl": "https://image.tmdb.org/t/p/w500/kbWValANhZI8rbWZXximXuMN4UN.jpg",
        "popularity": 15.656534,
    },
    {
        "id": "c3a9f5e1-7b2d-4e8a-a6c4-9d0e1f2b3c74",
        "name": "Monica Bellucci",
        "pictureUrl": "https://image.tmdb.org/t/p/w500/qlT4904d7tzkB26l3w5Hk6Uhp1q.jpg",
        "popularity": 16.096436,
    },
    {
        "id": "e8d2b4c6-1f3a-4b5c-8d7e-6a9f0c1b2d35",
        "name": "Gal Gadot",
        "pictureUrl": "https://image.tmdb.org/t/p/w500/fysvehTvU6bE3JgxaOTRfvQJzJ4.jpg",
        "popularity": 10.049256,
    },
]
