"""Vocabulary for memorable passwords: short, common, easy to type words."""

from typing import Tuple


WORDS: Tuple[str, ...] = (
    "able", "acorn", "actor", "agent", "alarm", "album", "amber", "anchor",
    "angle", "apple", "apron", "arena", "arrow", "atlas", "autumn", "badge",
    "baker", "banjo", "barn", "basil", "beach", "beacon", "berry", "bison",
    "blade", "blaze", "bloom", "board", "boat", "bonus", "boots", "brave",
    "bread", "brick", "bridge", "brook", "brush", "bucket", "cabin", "cable",
    "cactus", "camel", "candle", "canoe", "canyon", "cargo", "carpet", "castle",
    "cedar", "chalk", "cherry", "chess", "cider", "circle", "citrus", "clock",
    "cloud", "clover", "coast", "cobalt", "comet", "coral", "cotton", "crane",
    "crayon", "creek", "crown", "daisy", "dance", "delta", "denim", "desert",
    "dolphin", "dragon", "dream", "drift", "eagle", "earth", "echo", "ember",
    "engine", "falcon", "feather", "fern", "fiddle", "field", "flame", "flint",
    "forest", "fossil", "frost", "galaxy", "garden", "garlic", "ginger", "glacier",
    "globe", "grape", "gravel", "harbor", "harvest", "hazel", "honey", "horizon",
    "island", "ivory", "jacket", "jasmine", "jelly", "jungle", "kettle", "kiwi",
    "ladder", "lagoon", "lantern", "lemon", "letter", "lily", "lotus", "lunar",
    "magnet", "mango", "maple", "marble", "meadow", "melon", "meteor", "mirror",
    "mocha", "monkey", "mosaic", "motor", "mountain", "nectar", "needle", "noble",
    "nutmeg", "oasis", "ocean", "olive", "onion", "orbit", "orchid", "otter",
    "paddle", "panda", "paper", "parrot", "pebble", "pepper", "piano", "pilot",
    "planet", "plaza", "pocket", "polar", "pony", "prairie", "prism", "puzzle",
    "quartz", "quill", "rabbit", "radar", "rainbow", "raven", "reef", "ribbon",
    "river", "robin", "rocket", "saddle", "salmon", "satin", "scarf", "shadow",
    "shell", "silver", "sketch", "sonic", "spark", "spice", "spirit", "spring",
    "squash", "stamp", "storm", "sugar", "summit", "sunset", "swift", "table",
    "tango", "temple", "thunder", "tiger", "timber", "toast", "topaz", "tower",
    "trail", "tulip", "tunnel", "turtle", "umbrella", "valley", "velvet", "violet",
    "voyage", "wagon", "walnut", "water", "willow", "window", "winter", "wizard",
    "yacht", "yellow", "yogurt", "zebra", "zenith", "zephyr",
)
