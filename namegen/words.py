"""Bundled adjective and noun word lists (Docker/Heroku style naming)."""

from __future__ import annotations

from pathlib import Path

from namegen.errors import UnreadableWordList

ADJECTIVES: tuple[str, ...] = (
    "abiding", "able", "abrupt", "absurd", "acidic", "active", "adamant",
    "adorable", "aged", "agile", "airy", "alert", "amber", "ample", "ancient",
    "angry", "annoyed", "antique", "anxious", "arctic", "arid", "awesome",
    "bashful", "bent", "best", "better", "big", "bitter", "bland", "blazing",
    "bold", "boring", "bouncy", "brave", "breezy", "brief", "bright", "brisk",
    "broad", "bubbly", "bumpy", "busy", "calm", "candid", "careful", "casual",
    "cheerful", "chilly", "chunky", "civic", "classy", "clean", "clever",
    "cloudy", "clumsy", "coastal", "cold", "colossal", "cool", "cosmic",
    "cozy", "crafty", "crimson", "crisp", "cuddly", "curious", "curly",
    "daring", "dazzling", "deep", "delirious", "dense", "devout", "dizzy",
    "dreamy", "dusty", "eager", "early", "earnest", "easy", "elastic",
    "electric", "elegant", "eloquent", "emerald", "empty", "endless",
    "epic", "equal", "fancy", "fast", "fearless", "festive", "fierce",
    "filthy", "flaky", "flashy", "fluffy", "fond", "frantic", "free", "fresh",
    "friendly", "frosty", "frozen", "funny", "fuzzy", "gentle", "giant",
    "giddy", "gifted", "glad", "gleaming", "glossy", "golden", "graceful",
    "grand", "grumpy", "hairy", "handy", "happy", "hardy", "hasty", "heavy",
    "helpful", "hidden", "hollow", "honest", "huge", "humble", "hungry",
    "icy", "idle", "immense", "infinite", "jagged", "jolly", "jovial",
    "joyous", "juicy", "keen", "kind", "knotty", "large", "lazy", "legal",
    "light", "likable", "lively", "lonely", "loud", "lovely", "loyal",
    "lucky", "luminous", "lush", "magical", "majestic", "mellow", "merry",
    "mighty", "misty", "modern", "modest", "muddy", "mushy", "mystic",
    "narrow", "neat", "nervous", "nimble", "noble", "noisy", "nutty", "odd",
    "old", "orange", "ornate", "patient", "peaceful", "perky", "petite",
    "plain", "plucky", "plush", "polite", "posh", "precious", "pretty",
    "proud", "pushy", "quick", "quiet", "quirky", "radiant", "rapid", "rare",
    "raspy", "ready", "regal", "rich", "rigid", "ripe", "robust", "rosy",
    "rough", "round", "royal", "rusty", "rustic", "salty", "sandy", "savory",
    "scarlet", "shaggy", "sharp", "shiny", "short", "shy", "silent", "silky",
    "silly", "simple", "sleepy", "slim", "smart", "smooth", "snappy", "soft",
    "solid", "sparkly", "spicy", "spotty", "steady", "stellar", "sticky",
    "stormy", "strong", "sturdy", "sunny", "super", "sweet", "swift", "tall",
    "tame", "tangy", "tender", "thirsty", "tidy", "tiny", "tired", "tough",
    "tricky", "true", "twinkly", "unique", "upbeat", "urban", "valiant",
    "vast", "velvet", "vibrant", "vivid", "wacky", "warm", "wary", "wavy",
    "wealthy", "weary", "whimsical", "wild", "windy", "wise", "witty",
    "wobbly", "wooden", "worldly", "young", "yummy", "zany", "zealous",
    "zesty",
)

NOUNS: tuple[str, ...] = (
    "acorn", "airport", "album", "anchor", "apple", "arch", "arrow", "attic",
    "avenue", "badge", "bagel", "ball", "balloon", "banjo", "barn", "basket",
    "beach", "beacon", "bear", "bell", "bench", "berry", "bicycle", "blanket",
    "boat", "bolt", "book", "boot", "bottle", "boulder", "bridge", "brook",
    "brush", "bucket", "button", "cabin", "cable", "cactus", "camera",
    "candle", "canoe", "canyon", "carpet", "castle", "cave", "cellar",
    "chair", "channel", "cherry", "chimney", "circle", "city", "cliff",
    "clock", "cloud", "coast", "coffee", "comet", "compass", "cookie",
    "copper", "coral", "cottage", "crayon", "creek", "crown", "crystal",
    "cup", "curtain", "cushion", "daisy", "desert", "diamond", "dinosaur",
    "dock", "dolphin", "door", "dragon", "drum", "dune", "eagle", "engine",
    "falcon", "feather", "fence", "fern", "field", "fire", "flag", "flower",
    "flute", "forest", "fossil", "fountain", "fox", "frog", "galaxy",
    "garden", "garage", "gate", "glacier", "globe", "grape", "guitar",
    "hammer", "harbor", "hat", "hawk", "hill", "honey", "horizon", "house",
    "island", "jacket", "jar", "jelly", "jewel", "journey", "kettle", "key",
    "kingdom", "kite", "ladder", "lagoon", "lake", "lamp", "lantern", "leaf",
    "lemon", "library", "lighthouse", "lion", "lizard", "lobster", "lodge",
    "magnet", "mailbox", "maple", "marble", "market", "meadow", "meteor",
    "mirror", "mitten", "moon", "moose", "mountain", "muffin", "nail",
    "needle", "nest", "notebook", "nugget", "oak", "oasis", "ocean", "orbit",
    "orchard", "otter", "owl", "paddle", "pail", "palace", "panda", "paper",
    "parrot", "path", "peach", "pebble", "pencil", "penguin", "pepper",
    "piano", "pickle", "pier", "pillow", "pine", "planet", "plum", "pond",
    "pony", "puddle", "pumpkin", "puzzle", "quarry", "quill", "quilt",
    "rabbit", "radio", "rain", "rainbow", "raven", "reef", "ribbon", "river",
    "road", "robin", "rock", "rocket", "roll", "roof", "rose", "saddle",
    "sail", "salmon", "sandal", "scarf", "shadow", "shell", "ship", "shoe",
    "signal", "silver", "sky", "sled", "snow", "sock", "spark", "spoon",
    "spring", "star", "statue", "stone", "storm", "stream", "street", "sun",
    "sunset", "swan", "table", "teapot", "temple", "thunder", "tiger",
    "toast", "token", "tower", "trail", "train", "treasure", "tree",
    "trumpet", "tulip", "tunnel", "turtle", "umbrella", "valley", "vase",
    "violin", "volcano", "wagon", "wall", "walrus", "water", "waterfall",
    "wave", "whale", "wheel", "whistle", "willow", "window", "windmill",
    "wing", "wizard", "wolf", "yacht", "yard", "zebra", "zephyr",
)


def load_word_list(path: str | Path) -> tuple[str, ...]:
    """Read a plaintext word list, one word per line.

    Blank lines and lines starting with ``#`` are skipped. An empty result is
    returned as-is; the builder decides whether that is an error.
    """
    words = []
    try:
        with open(path, encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if not word or word.startswith("#"):
                    continue
                words.append(word)
    except UnicodeDecodeError as e:
        raise UnreadableWordList(path, "not valid UTF-8") from e
    return tuple(words)
