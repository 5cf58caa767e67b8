import collections
import functools

from .items import ItemType
from .models.enums import Logic, Reward, CRYSTALS, PENDANTS


def capability(func):
    """Memoizes a derived capability until the next item or reward is added."""
    @functools.wraps(func)
    def wrapper(self, *args):
        key = (func.__name__,) + args
        if key not in self._cache:
            self._cache[key] = func(self, *args)
        return self._cache[key]
    return wrapper


class Progression:
    """Items and rewards owned by one player.

    Only grows: every derived capability is a pure function of the counts, so anything
    true for a Progression stays true for any Progression holding more.
    """

    def __init__(self, items=(), rewards=()):
        self._counts = collections.Counter()
        self._rewards = collections.Counter()
        self._seen = set()
        self._completed = set()
        self._cache = {}
        self.add_all(items)
        for reward in rewards:
            self._rewards[reward] += 1

    def add(self, item):
        # The same Item instance is counted once, however often it is collected
        if item in self._seen:
            return False
        self._seen.add(item)
        self._counts[item.type] += 1
        self._cache.clear()
        return True

    def add_all(self, items):
        added = False
        for item in items:
            added = self.add(item) or added
        return added

    def add_reward(self, reward, region=None):
        if region is not None and region in self._completed:
            return False
        if region is not None:
            self._completed.add(region)
        if reward is None or reward == Reward.NONE:
            return region is not None
        self._rewards[reward] += 1
        self._cache.clear()
        return True

    def has_completed(self, region):
        return region in self._completed

    def count(self, item_type):
        return self._counts[item_type]

    def has(self, item_type, amount=1):
        return self._counts[item_type] >= amount

    def reward_count(self, *rewards):
        return sum(self._rewards[reward] for reward in rewards)

    def has_reward(self, reward):
        return self._rewards[reward] > 0

    def crystal_count(self):
        return self.reward_count(*CRYSTALS)

    def pendant_count(self):
        return self.reward_count(*PENDANTS)

    def memo(self, key, func):
        if key not in self._cache:
            self._cache[key] = func()
        return self._cache[key]

    def copy(self):
        clone = Progression()
        clone._counts = self._counts.copy()
        clone._rewards = self._rewards.copy()
        clone._seen = set(self._seen)
        clone._completed = set(self._completed)
        return clone

    def items(self):
        return dict(self._counts)

    def rewards(self):
        return dict(self._rewards)

    def __len__(self):
        return sum(self._counts.values())

    def __repr__(self):
        owned = ", ".join(item_type.value + " x" + str(count) for item_type, count in sorted(self._counts.items(), key=lambda x: x[0].value))
        return "<Progression " + owned + ">"

    ##########################################################################
    #                           Zelda capabilities
    ##########################################################################
    @capability
    def sword(self):
        return self.has(ItemType.PROGRESSIVE_SWORD)

    @capability
    def master_sword(self):
        return self.has(ItemType.PROGRESSIVE_SWORD, 2)

    @capability
    def can_lift_light(self):
        return self.has(ItemType.PROGRESSIVE_GLOVE)

    @capability
    def can_lift_heavy(self):
        return self.has(ItemType.PROGRESSIVE_GLOVE, 2)

    @capability
    def can_light_torches(self):
        return self.has(ItemType.FIREROD) or self.has(ItemType.LAMP)

    @capability
    def can_melt_freezors(self):
        return self.has(ItemType.FIREROD) or (self.has(ItemType.BOMBOS) and self.sword())

    # Enough magic for a sustained cape/byrna use
    @capability
    def can_extend_magic(self, bars=2):
        magic = (2 if self.has(ItemType.HALF_MAGIC) else 1) * (2 if self.has(ItemType.BOTTLE) else 1)
        return magic >= bars

    @capability
    def can_kill_many_enemies(self):
        return (self.sword() or self.has(ItemType.HAMMER) or self.has(ItemType.BOW) or
                self.has(ItemType.FIREROD) or self.has(ItemType.SOMARIA) or
                (self.has(ItemType.BYRNA) and self.can_extend_magic()))

    ##########################################################################
    #                        Super Metroid capabilities
    ##########################################################################
    @capability
    def can_ibj(self):
        return self.has(ItemType.MORPH) and self.has(ItemType.BOMBS)

    @capability
    def can_fly(self):
        return self.has(ItemType.SPACE_JUMP) or self.can_ibj()

    @capability
    def can_use_power_bombs(self):
        return self.has(ItemType.MORPH) and self.has(ItemType.POWER_BOMB)

    @capability
    def can_pass_bomb_passages(self):
        return self.has(ItemType.MORPH) and (self.has(ItemType.BOMBS) or self.has(ItemType.POWER_BOMB))

    @capability
    def can_destroy_bomb_walls(self):
        return self.can_pass_bomb_passages() or self.has(ItemType.SCREW_ATTACK)

    @capability
    def can_spring_ball_jump(self):
        return self.has(ItemType.MORPH) and self.has(ItemType.SPRING_BALL)

    @capability
    def has_energy_reserves(self, amount):
        return self.count(ItemType.ETANK) + self.count(ItemType.RESERVE_TANK) >= amount

    @capability
    def can_hell_run(self, logic=Logic.NORMAL):
        if logic == Logic.HARD:
            return self.has(ItemType.VARIA) or self.has_energy_reserves(3)
        return self.has(ItemType.VARIA) or self.has_energy_reserves(5)

    @capability
    def can_open_red_doors(self):
        return self.has(ItemType.MISSILE) or self.has(ItemType.SUPER)

    ##########################################################################
    #                          Cross-game portals
    ##########################################################################
    @capability
    def can_access_death_mountain_portal(self):
        return (self.can_destroy_bomb_walls() or self.has(ItemType.SPEED_BOOSTER)) and \
            self.has(ItemType.SUPER) and self.has(ItemType.MORPH)

    @capability
    def can_access_dark_world_portal(self, config):
        cards = not config.metroid_keysanity or self.has(ItemType.CARD_MARIDIA_BOSS)
        if config.logic == Logic.HARD:
            return cards and self.can_use_power_bombs() and self.has(ItemType.SUPER) and \
                (self.has(ItemType.GRAVITY) or (self.has(ItemType.HI_JUMP) and self.has(ItemType.ICE_BEAM)))
        return cards and self.can_use_power_bombs() and self.has(ItemType.SUPER) and \
            self.has(ItemType.GRAVITY) and self.has(ItemType.SPEED_BOOSTER)

    @capability
    def can_access_misery_mire_portal(self, config):
        cards = not config.metroid_keysanity or self.has(ItemType.CARD_LOWER_NORFAIR_BOSS)
        return cards and self.has(ItemType.VARIA) and self.has(ItemType.SUPER) and \
            (self.has(ItemType.GRAVITY) and self.has(ItemType.SPACE_JUMP) or config.logic == Logic.HARD) and \
            self.can_use_power_bombs()

    @capability
    def can_access_norfair_upper_portal(self):
        return self.has(ItemType.FLUTE) or (self.can_lift_light() and self.has(ItemType.LAMP))

    @capability
    def can_access_norfair_lower_portal(self):
        return self.has(ItemType.FLUTE) and self.can_lift_heavy()

    @capability
    def can_access_maridia_portal(self):
        return self.has(ItemType.MOON_PEARL) and self.has(ItemType.FLIPPERS) and \
            self.has(ItemType.GRAVITY) and self.has(ItemType.MORPH) and \
            (self.has_reward(Reward.AGAHNIM) or (self.has(ItemType.HAMMER) and self.can_lift_light()) or self.can_lift_heavy())
