ASSETS_PATH: str = "./assets/"
TEXTURES_PATH: str = ASSETS_PATH + "textures/"

TITLE_TEXTURE_PATH: str = TEXTURES_PATH + "title.png"
FENCE_TEXTURE_PATH: str = TEXTURES_PATH + "fence.png"

DIRECTIONS: tuple[str, ...] = ("left", "right", "up", "down")


def cow_texture_path(direction: str, index: int) -> str:
    return f"{TEXTURES_PATH}cows/cow_{direction}_{index}.png"


def person_texture_path(direction: str, index: int) -> str:
    return f"{TEXTURES_PATH}person/person_{direction}_{index}.png"
