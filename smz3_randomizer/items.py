import collections
from enum import Enum, Flag, auto

from .errors import InvalidConfigurationError


class ItemCategory(Flag):
    NONE = 0
    SMALL_KEY = auto()
    BIG_KEY = auto()
    MAP = auto()
    COMPASS = auto()
    KEYCARD = auto()
    JUNK = auto()
    SCAM = auto()
    NICE = auto()
    MEDALLION = auto()
    ZELDA = auto()
    METROID = auto()


class ItemType(Enum):
    # Zelda equipment
    PROGRESSIVE_SWORD = "Progressive Sword"
    PROGRESSIVE_SHIELD = "Progressive Shield"
    PROGRESSIVE_TUNIC = "Progressive Tunic"
    PROGRESSIVE_GLOVE = "Progressive Glove"
    BOW = "Bow"
    SILVER_ARROWS = "Silver Arrows"
    BOOMERANG = "Blue Boomerang"
    RED_BOOMERANG = "Red Boomerang"
    HOOKSHOT = "Hookshot"
    POWDER = "Magic Powder"
    FIREROD = "Fire Rod"
    ICEROD = "Ice Rod"
    BOMBOS = "Bombos"
    ETHER = "Ether"
    QUAKE = "Quake"
    LAMP = "Lamp"
    HAMMER = "Hammer"
    SHOVEL = "Shovel"
    FLUTE = "Flute"
    BUGNET = "Bug Catching Net"
    BOOK = "Book of Mudora"
    BOTTLE = "Bottle"
    SOMARIA = "Cane of Somaria"
    BYRNA = "Cane of Byrna"
    CAPE = "Magic Cape"
    MIRROR = "Magic Mirror"
    BOOTS = "Pegasus Boots"
    FLIPPERS = "Zora's Flippers"
    MOON_PEARL = "Moon Pearl"
    HALF_MAGIC = "Half Magic"

    # Zelda filler
    HEART_PIECE = "Piece of Heart"
    HEART_CONTAINER = "Heart Container"
    ONE_RUPEE = "One Rupee"
    TWENTY_RUPEES = "Twenty Rupees"
    FIFTY_RUPEES = "Fifty Rupees"
    ONE_HUNDRED_RUPEES = "One Hundred Rupees"
    THREE_HUNDRED_RUPEES = "Three Hundred Rupees"
    ARROW = "Single Arrow"
    TEN_ARROWS = "Ten Arrows"
    THREE_BOMBS = "Three Bombs"
    TEN_BOMBS = "Ten Bombs"

    # Zelda dungeon items
    KEY_CT = "Castle Tower Key"
    BIG_KEY_EP = "Eastern Palace Big Key"
    MAP_EP = "Eastern Palace Map"
    COMPASS_EP = "Eastern Palace Compass"
    KEY_DP = "Desert Palace Key"
    BIG_KEY_DP = "Desert Palace Big Key"
    MAP_DP = "Desert Palace Map"
    COMPASS_DP = "Desert Palace Compass"
    KEY_TH = "Tower of Hera Key"
    BIG_KEY_TH = "Tower of Hera Big Key"
    MAP_TH = "Tower of Hera Map"
    COMPASS_TH = "Tower of Hera Compass"
    KEY_PD = "Palace of Darkness Key"
    BIG_KEY_PD = "Palace of Darkness Big Key"
    MAP_PD = "Palace of Darkness Map"
    COMPASS_PD = "Palace of Darkness Compass"
    KEY_SP = "Swamp Palace Key"
    BIG_KEY_SP = "Swamp Palace Big Key"
    MAP_SP = "Swamp Palace Map"
    COMPASS_SP = "Swamp Palace Compass"
    KEY_SW = "Skull Woods Key"
    BIG_KEY_SW = "Skull Woods Big Key"
    MAP_SW = "Skull Woods Map"
    COMPASS_SW = "Skull Woods Compass"
    KEY_TT = "Thieves' Town Key"
    BIG_KEY_TT = "Thieves' Town Big Key"
    MAP_TT = "Thieves' Town Map"
    COMPASS_TT = "Thieves' Town Compass"
    KEY_IP = "Ice Palace Key"
    BIG_KEY_IP = "Ice Palace Big Key"
    MAP_IP = "Ice Palace Map"
    COMPASS_IP = "Ice Palace Compass"
    KEY_MM = "Misery Mire Key"
    BIG_KEY_MM = "Misery Mire Big Key"
    MAP_MM = "Misery Mire Map"
    COMPASS_MM = "Misery Mire Compass"
    KEY_TR = "Turtle Rock Key"
    BIG_KEY_TR = "Turtle Rock Big Key"
    MAP_TR = "Turtle Rock Map"
    COMPASS_TR = "Turtle Rock Compass"
    KEY_GT = "Ganon's Tower Key"
    BIG_KEY_GT = "Ganon's Tower Big Key"
    MAP_GT = "Ganon's Tower Map"
    COMPASS_GT = "Ganon's Tower Compass"

    # Super Metroid equipment
    MISSILE = "Missile"
    SUPER = "Super Missile"
    POWER_BOMB = "Power Bomb"
    GRAPPLE = "Grappling Beam"
    XRAY = "X-Ray Scope"
    VARIA = "Varia Suit"
    SPRING_BALL = "Spring Ball"
    MORPH = "Morph Ball"
    SCREW_ATTACK = "Screw Attack"
    GRAVITY = "Gravity Suit"
    HI_JUMP = "Hi-Jump Boots"
    SPACE_JUMP = "Space Jump"
    BOMBS = "Morph Ball Bombs"
    SPEED_BOOSTER = "Speed Booster"
    CHARGE = "Charge Beam"
    ICE_BEAM = "Ice Beam"
    WAVE = "Wave Beam"
    SPAZER = "Spazer"
    PLASMA = "Plasma Beam"
    ETANK = "Energy Tank"
    RESERVE_TANK = "Reserve Tank"

    # Super Metroid keycards
    CARD_CRATERIA_L1 = "Crateria Level 1 Keycard"
    CARD_CRATERIA_BOSS = "Crateria Boss Keycard"
    CARD_BRINSTAR_L1 = "Brinstar Level 1 Keycard"
    CARD_BRINSTAR_BOSS = "Brinstar Boss Keycard"
    CARD_NORFAIR_L1 = "Norfair Level 1 Keycard"
    CARD_WRECKED_SHIP_BOSS = "Wrecked Ship Boss Keycard"
    CARD_MARIDIA_BOSS = "Maridia Boss Keycard"
    CARD_LOWER_NORFAIR_BOSS = "Lower Norfair Boss Keycard"

    @classmethod
    def from_name(cls, name):
        """Looks up an item type by enum name or display name, ignoring case."""
        key = name.strip().lower()
        for item_type in cls:
            if item_type.name.lower() == key or item_type.value.lower() == key:
                return item_type
        raise ValueError("Unknown item: " + name)


METROID_ITEMS = {
    ItemType.MISSILE, ItemType.SUPER, ItemType.POWER_BOMB, ItemType.GRAPPLE, ItemType.XRAY,
    ItemType.VARIA, ItemType.SPRING_BALL, ItemType.MORPH, ItemType.SCREW_ATTACK, ItemType.GRAVITY,
    ItemType.HI_JUMP, ItemType.SPACE_JUMP, ItemType.BOMBS, ItemType.SPEED_BOOSTER, ItemType.CHARGE,
    ItemType.ICE_BEAM, ItemType.WAVE, ItemType.SPAZER, ItemType.PLASMA, ItemType.ETANK,
    ItemType.RESERVE_TANK,
}

JUNK_ITEMS = {
    ItemType.HEART_PIECE, ItemType.TWENTY_RUPEES, ItemType.FIFTY_RUPEES, ItemType.ONE_HUNDRED_RUPEES,
    ItemType.THREE_HUNDRED_RUPEES, ItemType.TEN_ARROWS, ItemType.TEN_BOMBS,
}

SCAM_ITEMS = {ItemType.ONE_RUPEE, ItemType.ARROW, ItemType.THREE_BOMBS}

NICE_ITEMS = {
    ItemType.PROGRESSIVE_SHIELD, ItemType.PROGRESSIVE_TUNIC, ItemType.BOOMERANG, ItemType.RED_BOOMERANG,
    ItemType.POWDER, ItemType.BUGNET, ItemType.HEART_CONTAINER, ItemType.RESERVE_TANK,
}

MEDALLIONS = {ItemType.BOMBOS, ItemType.ETHER, ItemType.QUAKE}


def _categorize(item_type):
    name = item_type.name
    if name.startswith("CARD_"):
        category = ItemCategory.KEYCARD | ItemCategory.METROID
    elif name.startswith("BIG_KEY_"):
        category = ItemCategory.BIG_KEY | ItemCategory.ZELDA
    elif name.startswith("KEY_"):
        category = ItemCategory.SMALL_KEY | ItemCategory.ZELDA
    elif name.startswith("MAP_"):
        category = ItemCategory.MAP | ItemCategory.ZELDA
    elif name.startswith("COMPASS_"):
        category = ItemCategory.COMPASS | ItemCategory.ZELDA
    elif item_type in METROID_ITEMS:
        category = ItemCategory.METROID
    else:
        category = ItemCategory.ZELDA

    if item_type in JUNK_ITEMS:
        category |= ItemCategory.JUNK
    if item_type in SCAM_ITEMS:
        category |= ItemCategory.SCAM
    if item_type in NICE_ITEMS:
        category |= ItemCategory.NICE
    if item_type in MEDALLIONS:
        category |= ItemCategory.MEDALLION
    return category


ITEM_CATEGORIES = {item_type: _categorize(item_type) for item_type in ItemType}

DUNGEON_CATEGORIES = ItemCategory.SMALL_KEY | ItemCategory.BIG_KEY | ItemCategory.MAP | ItemCategory.COMPASS


class Item:
    """A single collectible. Ownership (the world it belongs to) is fixed at creation."""

    __slots__ = ("_type", "_world", "_ordinal", "_progression")

    def __init__(self, item_type, world=None, ordinal=1, progression=False):
        self._type = item_type
        self._world = world
        self._ordinal = ordinal
        self._progression = progression

    @property
    def type(self):
        return self._type

    @property
    def world(self):
        return self._world

    @property
    def ordinal(self):
        return self._ordinal

    @property
    def progression(self):
        return self._progression

    @property
    def name(self):
        return self._type.value

    @property
    def category(self):
        return ITEM_CATEGORIES[self._type]

    def is_(self, item_type, world=None):
        return self._type == item_type and (world is None or self._world is world)

    def is_in_category(self, *categories):
        return any(self.category & category for category in categories)

    @property
    def is_dungeon_item(self):
        return bool(self.category & DUNGEON_CATEGORIES)

    @property
    def is_key(self):
        return bool(self.category & ItemCategory.SMALL_KEY)

    @property
    def is_big_key(self):
        return bool(self.category & ItemCategory.BIG_KEY)

    @property
    def is_keycard(self):
        return bool(self.category & ItemCategory.KEYCARD)

    @property
    def is_junk(self):
        return bool(self.category & (ItemCategory.JUNK | ItemCategory.SCAM))

    def __repr__(self):
        owner = self._world.player if self._world is not None else "-"
        return "<Item " + self.name + " #" + str(self._ordinal) + " (" + str(owner) + ")>"


# Items that can gate a location. Access rules never require a nice or junk item
PROGRESSION_POOL = [
    (ItemType.PROGRESSIVE_SWORD, 4),
    (ItemType.PROGRESSIVE_GLOVE, 2),
    (ItemType.BOW, 1),
    (ItemType.SILVER_ARROWS, 1),
    (ItemType.HOOKSHOT, 1),
    (ItemType.FIREROD, 1),
    (ItemType.ICEROD, 1),
    (ItemType.BOMBOS, 1),
    (ItemType.ETHER, 1),
    (ItemType.QUAKE, 1),
    (ItemType.LAMP, 1),
    (ItemType.HAMMER, 1),
    (ItemType.SHOVEL, 1),
    (ItemType.FLUTE, 1),
    (ItemType.BOOK, 1),
    (ItemType.BOTTLE, 1),
    (ItemType.SOMARIA, 1),
    (ItemType.BYRNA, 1),
    (ItemType.CAPE, 1),
    (ItemType.MIRROR, 1),
    (ItemType.BOOTS, 1),
    (ItemType.FLIPPERS, 1),
    (ItemType.MOON_PEARL, 1),
    (ItemType.HALF_MAGIC, 1),
    (ItemType.MORPH, 1),
    (ItemType.BOMBS, 1),
    (ItemType.CHARGE, 1),
    (ItemType.ICE_BEAM, 1),
    (ItemType.WAVE, 1),
    (ItemType.SPAZER, 1),
    (ItemType.PLASMA, 1),
    (ItemType.VARIA, 1),
    (ItemType.GRAVITY, 1),
    (ItemType.GRAPPLE, 1),
    (ItemType.XRAY, 1),
    (ItemType.HI_JUMP, 1),
    (ItemType.SPACE_JUMP, 1),
    (ItemType.SPEED_BOOSTER, 1),
    (ItemType.SCREW_ATTACK, 1),
    (ItemType.SPRING_BALL, 1),
    (ItemType.MISSILE, 2),
    (ItemType.SUPER, 2),
    (ItemType.POWER_BOMB, 2),
    (ItemType.ETANK, 6),
]

NICE_POOL = [
    (ItemType.PROGRESSIVE_SHIELD, 3),
    (ItemType.PROGRESSIVE_TUNIC, 2),
    (ItemType.BOOMERANG, 1),
    (ItemType.RED_BOOMERANG, 1),
    (ItemType.POWDER, 1),
    (ItemType.BUGNET, 1),
    (ItemType.BOTTLE, 3),
    (ItemType.HEART_CONTAINER, 2),
    (ItemType.RESERVE_TANK, 2),
]

DUNGEON_POOL = [
    (ItemType.KEY_CT, 2),
    (ItemType.BIG_KEY_EP, 1), (ItemType.MAP_EP, 1), (ItemType.COMPASS_EP, 1),
    (ItemType.KEY_DP, 1), (ItemType.BIG_KEY_DP, 1), (ItemType.MAP_DP, 1), (ItemType.COMPASS_DP, 1),
    (ItemType.KEY_TH, 1), (ItemType.BIG_KEY_TH, 1), (ItemType.MAP_TH, 1), (ItemType.COMPASS_TH, 1),
    (ItemType.KEY_PD, 3), (ItemType.BIG_KEY_PD, 1), (ItemType.MAP_PD, 1), (ItemType.COMPASS_PD, 1),
    (ItemType.KEY_SP, 1), (ItemType.BIG_KEY_SP, 1), (ItemType.MAP_SP, 1), (ItemType.COMPASS_SP, 1),
    (ItemType.KEY_SW, 3), (ItemType.BIG_KEY_SW, 1), (ItemType.MAP_SW, 1), (ItemType.COMPASS_SW, 1),
    (ItemType.KEY_TT, 1), (ItemType.BIG_KEY_TT, 1), (ItemType.MAP_TT, 1), (ItemType.COMPASS_TT, 1),
    (ItemType.KEY_IP, 2), (ItemType.BIG_KEY_IP, 1), (ItemType.MAP_IP, 1), (ItemType.COMPASS_IP, 1),
    (ItemType.KEY_MM, 2), (ItemType.BIG_KEY_MM, 1), (ItemType.MAP_MM, 1), (ItemType.COMPASS_MM, 1),
    (ItemType.KEY_TR, 2), (ItemType.BIG_KEY_TR, 1), (ItemType.MAP_TR, 1), (ItemType.COMPASS_TR, 1),
    (ItemType.KEY_GT, 2), (ItemType.BIG_KEY_GT, 1), (ItemType.MAP_GT, 1), (ItemType.COMPASS_GT, 1),
]

KEYCARD_POOL = [
    (ItemType.CARD_CRATERIA_L1, 1),
    (ItemType.CARD_CRATERIA_BOSS, 1),
    (ItemType.CARD_BRINSTAR_L1, 1),
    (ItemType.CARD_BRINSTAR_BOSS, 1),
    (ItemType.CARD_NORFAIR_L1, 1),
    (ItemType.CARD_WRECKED_SHIP_BOSS, 1),
    (ItemType.CARD_MARIDIA_BOSS, 1),
    (ItemType.CARD_LOWER_NORFAIR_BOSS, 1),
]

# Cycled through until the pool matches the location count
JUNK_ROTATION = [
    ItemType.MISSILE, ItemType.TWENTY_RUPEES, ItemType.SUPER, ItemType.TEN_ARROWS,
    ItemType.POWER_BOMB, ItemType.FIFTY_RUPEES, ItemType.HEART_PIECE, ItemType.MISSILE,
    ItemType.TEN_BOMBS, ItemType.ETANK, ItemType.ONE_HUNDRED_RUPEES, ItemType.HEART_PIECE,
    ItemType.THREE_HUNDRED_RUPEES, ItemType.MISSILE, ItemType.ONE_RUPEE, ItemType.THREE_BOMBS,
]


class ItemPool:
    def __init__(self, progression=None, nice=None, dungeon=None, junk=None):
        self.progression = list(progression or [])
        self.nice = list(nice or [])
        self.dungeon = list(dungeon or [])
        self.junk = list(junk or [])

    def __len__(self):
        return len(self.dungeon) + len(self.progression) + len(self.nice) + len(self.junk)


class ItemFactory:
    """Creates the items of one world, numbering copies of the same kind in creation order."""

    def __init__(self, world):
        self.world = world
        self.ordinals = collections.Counter()

    def create(self, item_type, progression=False):
        self.ordinals[item_type] += 1
        return Item(item_type, self.world, self.ordinals[item_type], progression)

    def create_pool(self, pool, progression=False):
        items = []
        for item_type, count in pool:
            for _ in range(count):
                items.append(self.create(item_type, progression))
        return items

    def create_junk(self, count, rotation=JUNK_ROTATION):
        return [self.create(rotation[i % len(rotation)]) for i in range(count)]


def create_progression_items(world, factory=None):
    factory = factory or ItemFactory(world)
    return factory.create_pool(PROGRESSION_POOL, True)


def create_nice_items(world, factory=None):
    factory = factory or ItemFactory(world)
    return factory.create_pool(NICE_POOL)


def create_dungeon_items(world, factory=None):
    factory = factory or ItemFactory(world)
    return factory.create_pool(DUNGEON_POOL, True)


def create_keycards(world, factory=None):
    factory = factory or ItemFactory(world)
    return factory.create_pool(KEYCARD_POOL, True)


def create_junk_items(world, count, factory=None):
    factory = factory or ItemFactory(world)
    return factory.create_junk(count)


def create_item_pool(world):
    factory = ItemFactory(world)
    progression = create_progression_items(world, factory)
    dungeon = create_dungeon_items(world, factory)
    nice = create_nice_items(world, factory)

    if world.config.metroid_keysanity:
        progression += create_keycards(world, factory)
    if world.config.zelda_keysanity:
        progression += dungeon
        dungeon = []

    junk_count = len(world.locations) - len(progression) - len(dungeon) - len(nice)
    if junk_count < 0:
        raise InvalidConfigurationError("Item pool has " + str(-junk_count) + " more items than the world has locations")

    return ItemPool(progression, nice, dungeon, create_junk_items(world, junk_count, factory))
