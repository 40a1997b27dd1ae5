"""Shared puzzle fixtures for the test suite."""

from vnconnections.types import POSITIONAL_TIERS, Group, OverallDifficulty, Puzzle, Word

VIET_GROUPS = [
    ("Số đếm", ["một", "hai", "ba", "bốn"]),
    ("Màu sắc", ["đỏ", "xanh", "vàng", "tím"]),
    ("Động vật", ["mèo", "chó", "gà", "vịt"]),
    ("Trái cây", ["cam", "chuối", "táo", "nho"]),
]


def make_puzzle(groups=None, puzzle_id="p1", **kwargs):
    groups = groups or VIET_GROUPS
    built = []
    for i, (theme, words) in enumerate(groups):
        color, level = POSITIONAL_TIERS[i % 4]
        built.append(Group(
            id=f"g{i}",
            theme=theme,
            words=[Word(id=f"g{i}w{j}", text=w) for j, w in enumerate(words)],
            color=color,
            difficulty=level,
        ))
    kwargs.setdefault("overall_difficulty", OverallDifficulty.EASY)
    return Puzzle(id=puzzle_id, groups=built, **kwargs)


def model_response(groups=None, game_name="Trò chơi", difficulty="hard", colors=None):
    """JSON text shaped like a model answer."""
    import json
    groups = groups or VIET_GROUPS
    colors = colors or ["green", "yellow", "purple", "red"]
    return json.dumps({
        "gameName": game_name,
        "overallDifficulty": difficulty,
        "groups": [
            {"color": c, "theme": theme, "words": words}
            for c, (theme, words) in zip(colors, groups)
        ],
    }, ensure_ascii=False)
