"""Static move table.

Category, type and base power for the moves that show up in competitive
random-battle pools. Keys are normalized ids (see `to_id`). The table is
read-only after import; revise the entries here without touching the
generation logic.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from randset.data.names import to_id


class MoveCategory(str, Enum):
    """Damage category of a move."""
    PHYSICAL = "physical"
    SPECIAL = "special"
    STATUS = "status"

    @property
    def display_name(self) -> str:
        return self.value.title()


def is_damaging(category: MoveCategory) -> bool:
    return category is not MoveCategory.STATUS


@dataclass(frozen=True)
class MoveData:
    """Data for a Pokemon move."""
    name: str
    power: int
    move_type: str  # lowercase type id, "" when untyped
    category: MoveCategory

    @property
    def is_damaging(self) -> bool:
        return is_damaging(self.category)


P = MoveCategory.PHYSICAL
S = MoveCategory.SPECIAL
X = MoveCategory.STATUS

_ENTRIES = [
    # Normal
    ("Body Slam", "normal", P, 85),
    ("Boomburst", "normal", S, 140),
    ("Double-Edge", "normal", P, 120),
    ("Explosion", "normal", P, 250),
    ("Extreme Speed", "normal", P, 80),
    ("Facade", "normal", P, 70),
    ("Fake Out", "normal", P, 40),
    ("Feint", "normal", P, 30),
    ("Giga Impact", "normal", P, 150),
    ("Head Charge", "normal", P, 120),
    ("Hyper Beam", "normal", S, 150),
    ("Hyper Fang", "normal", P, 80),
    ("Hyper Voice", "normal", S, 90),
    ("Judgment", "normal", S, 100),
    ("Last Resort", "normal", P, 140),
    ("Multi-Attack", "normal", P, 120),
    ("Quick Attack", "normal", P, 40),
    ("Rapid Spin", "normal", P, 50),
    ("Relic Song", "normal", S, 75),
    ("Return", "normal", P, 102),
    ("Scratch", "normal", P, 40),
    ("Self-Destruct", "normal", P, 200),
    ("Slash", "normal", P, 70),
    ("Tackle", "normal", P, 40),
    ("Tail Slap", "normal", P, 25),
    ("Take Down", "normal", P, 90),
    ("Techno Blast", "normal", S, 120),
    ("Tera Blast", "normal", S, 80),
    ("Tri Attack", "normal", S, 80),
    ("Uproar", "normal", S, 90),
    ("Weather Ball", "normal", S, 50),
    ("Round", "normal", S, 60),
    ("Snore", "normal", S, 50),
    ("Echoed Voice", "normal", S, 40),
    ("Population Bomb", "normal", P, 20),
    ("Double Hit", "normal", P, 35),
    ("Fury Attack", "normal", P, 15),
    ("Fury Swipes", "normal", P, 18),
    ("Double Slap", "normal", P, 15),
    ("Comet Punch", "normal", P, 18),
    ("Barrage", "normal", P, 15),
    ("Spike Cannon", "normal", P, 20),
    ("Dizzy Punch", "normal", P, 70),
    ("Mega Punch", "normal", P, 80),
    ("Mega Kick", "normal", P, 120),
    ("Crush Claw", "normal", P, 75),
    ("Pay Day", "normal", P, 40),
    ("Headbutt", "normal", P, 70),
    ("Stomp", "normal", P, 65),
    ("Strength", "normal", P, 80),
    ("Swift", "normal", S, 60),
    ("Hold Hands", "normal", X, 0),
    ("Happy Hour", "normal", X, 0),
    ("Celebrate", "normal", X, 0),
    ("Belly Drum", "normal", X, 0),
    ("Block", "normal", X, 0),
    ("Encore", "normal", X, 0),
    ("Follow Me", "normal", X, 0),
    ("Glare", "normal", X, 0),
    ("Growl", "normal", X, 0),
    ("Growth", "normal", X, 0),
    ("Haze", "ice", X, 0),
    ("Heal Bell", "normal", X, 0),
    ("Helping Hand", "normal", X, 0),
    ("Howl", "normal", X, 0),
    ("Milk Drink", "normal", X, 0),
    ("Noble Roar", "normal", X, 0),
    ("Protect", "normal", X, 0),
    ("Recover", "normal", X, 0),
    ("Screech", "normal", X, 0),
    ("Shell Smash", "normal", X, 0),
    ("Shore Up", "ground", X, 0),
    ("Sing", "normal", X, 0),
    ("Slack Off", "normal", X, 0),
    ("Sleep Talk", "normal", X, 0),
    ("Soft-Boiled", "normal", X, 0),
    ("Substitute", "normal", X, 0),
    ("Supersonic", "normal", X, 0),
    ("Swords Dance", "normal", X, 0),
    ("Tidy Up", "normal", X, 0),
    ("Wish", "normal", X, 0),
    ("Work Up", "normal", X, 0),
    ("Yawn", "normal", X, 0),
    ("Court Change", "normal", X, 0),
    ("Teleport", "psychic", X, 0),
    ("Baton Pass", "normal", X, 0),
    ("Whirlwind", "normal", X, 0),
    ("Roar", "normal", X, 0),
    ("Perish Song", "normal", X, 0),
    ("Transform", "normal", X, 0),
    ("Shed Tail", "normal", X, 0),
    ("Revival Blessing", "normal", X, 0),
    ("Fillet Away", "normal", X, 0),
    ("Clangorous Soul", "dragon", X, 0),
    # Fire
    ("Blaze Kick", "fire", P, 85),
    ("Blue Flare", "fire", S, 130),
    ("Burn Up", "fire", S, 130),
    ("Eruption", "fire", S, 150),
    ("Fire Blast", "fire", S, 110),
    ("Fire Fang", "fire", P, 65),
    ("Fire Lash", "fire", P, 80),
    ("Fire Punch", "fire", P, 75),
    ("Flame Charge", "fire", P, 50),
    ("Flamethrower", "fire", S, 90),
    ("Flare Blitz", "fire", P, 120),
    ("Fusion Flare", "fire", S, 100),
    ("Heat Crash", "fire", P, 100),
    ("Heat Wave", "fire", S, 95),
    ("Lava Plume", "fire", S, 80),
    ("Magma Storm", "fire", S, 100),
    ("Mind Blown", "fire", S, 150),
    ("Mystical Fire", "fire", S, 75),
    ("Overheat", "fire", S, 130),
    ("Pyro Ball", "fire", P, 120),
    ("Sacred Fire", "fire", P, 100),
    ("V-create", "fire", P, 180),
    ("Armor Cannon", "fire", S, 120),
    ("Bitter Blade", "fire", P, 90),
    ("Torch Song", "fire", S, 80),
    ("Raging Fury", "fire", P, 120),
    ("Temper Flare", "fire", P, 75),
    ("Will-O-Wisp", "fire", X, 0),
    ("Sunny Day", "fire", X, 0),
    # Water
    ("Aqua Jet", "water", P, 40),
    ("Aqua Tail", "water", P, 90),
    ("Crabhammer", "water", P, 100),
    ("Fishious Rend", "water", P, 85),
    ("Flip Turn", "water", P, 60),
    ("Hydro Pump", "water", S, 110),
    ("Jet Punch", "water", P, 60),
    ("Liquidation", "water", P, 85),
    ("Muddy Water", "water", S, 90),
    ("Origin Pulse", "water", S, 110),
    ("Scald", "water", S, 80),
    ("Sparkling Aria", "water", S, 90),
    ("Steam Eruption", "water", S, 110),
    ("Surf", "water", S, 90),
    ("Surging Strikes", "water", P, 25),
    ("Water Pulse", "water", S, 60),
    ("Water Shuriken", "water", S, 15),
    ("Water Spout", "water", S, 150),
    ("Waterfall", "water", P, 80),
    ("Wave Crash", "water", P, 120),
    ("Hydro Steam", "water", S, 80),
    ("Chilling Water", "water", S, 50),
    ("Snipe Shot", "water", S, 80),
    ("Razor Shell", "water", P, 75),
    ("Aqua Step", "water", P, 80),
    ("Rain Dance", "water", X, 0),
    ("Soak", "water", X, 0),
    ("Life Dew", "water", X, 0),
    # Electric
    ("Bolt Strike", "electric", P, 130),
    ("Discharge", "electric", S, 80),
    ("Electro Ball", "electric", S, 60),
    ("Electroweb", "electric", S, 55),
    ("Fusion Bolt", "electric", P, 100),
    ("Nuzzle", "electric", P, 20),
    ("Overdrive", "electric", S, 80),
    ("Parabolic Charge", "electric", S, 65),
    ("Plasma Fists", "electric", P, 100),
    ("Rising Voltage", "electric", S, 70),
    ("Supercell Slam", "electric", P, 100),
    ("Thunder", "electric", S, 110),
    ("Thunder Fang", "electric", P, 65),
    ("Thunder Punch", "electric", P, 75),
    ("Thunderbolt", "electric", S, 90),
    ("Thunderclap", "electric", S, 70),
    ("Volt Switch", "electric", S, 70),
    ("Volt Tackle", "electric", P, 120),
    ("Wild Charge", "electric", P, 90),
    ("Zing Zap", "electric", P, 80),
    ("Charge Beam", "electric", S, 50),
    ("Zap Cannon", "electric", S, 120),
    ("Double Shock", "electric", P, 120),
    ("Electro Drift", "electric", S, 100),
    ("Thunder Wave", "electric", X, 0),
    ("Charge", "electric", X, 0),
    ("Magnet Rise", "electric", X, 0),
    # Grass
    ("Apple Acid", "grass", S, 80),
    ("Bullet Seed", "grass", P, 25),
    ("Energy Ball", "grass", S, 90),
    ("Flower Trick", "grass", P, 70),
    ("Frenzy Plant", "grass", S, 150),
    ("Giga Drain", "grass", S, 75),
    ("Grass Knot", "grass", S, 80),
    ("Grassy Glide", "grass", P, 55),
    ("Grav Apple", "grass", P, 80),
    ("Horn Leech", "grass", P, 75),
    ("Leaf Blade", "grass", P, 90),
    ("Leaf Storm", "grass", S, 130),
    ("Petal Blizzard", "grass", P, 90),
    ("Power Whip", "grass", P, 120),
    ("Seed Bomb", "grass", P, 80),
    ("Seed Flare", "grass", S, 120),
    ("Solar Beam", "grass", S, 120),
    ("Solar Blade", "grass", P, 125),
    ("Trailblaze", "grass", P, 50),
    ("Wood Hammer", "grass", P, 120),
    ("Absorb", "grass", S, 20),
    ("Mega Drain", "grass", S, 40),
    ("Petal Dance", "grass", S, 120),
    ("Leaf Tornado", "grass", S, 65),
    ("Ivy Cudgel", "grass", P, 100),
    ("Matcha Gotcha", "grass", S, 80),
    ("Jungle Healing", "grass", X, 0),
    ("Leech Seed", "grass", X, 0),
    ("Sleep Powder", "grass", X, 0),
    ("Spore", "grass", X, 0),
    ("Stun Spore", "grass", X, 0),
    ("Cotton Spore", "grass", X, 0),
    ("Cotton Guard", "grass", X, 0),
    ("Synthesis", "grass", X, 0),
    ("Strength Sap", "grass", X, 0),
    ("Grass Whistle", "grass", X, 0),
    # Ice
    ("Blizzard", "ice", S, 110),
    ("Freeze-Dry", "ice", S, 70),
    ("Glacial Lance", "ice", P, 120),
    ("Ice Beam", "ice", S, 90),
    ("Ice Fang", "ice", P, 65),
    ("Ice Punch", "ice", P, 75),
    ("Ice Shard", "ice", P, 40),
    ("Ice Spinner", "ice", P, 80),
    ("Icicle Crash", "ice", P, 85),
    ("Icicle Spear", "ice", P, 25),
    ("Icy Wind", "ice", S, 55),
    ("Triple Axel", "ice", P, 20),
    ("Freezing Glare", "ice", S, 90),
    ("Ice Hammer", "ice", P, 100),
    ("Avalanche", "ice", P, 60),
    ("Mountain Gale", "ice", P, 100),
    ("Aurora Veil", "ice", X, 0),
    ("Hail", "ice", X, 0),
    ("Snowscape", "ice", X, 0),
    ("Chilly Reception", "ice", X, 0),
    # Fighting
    ("Arm Thrust", "fighting", P, 15),
    ("Aura Sphere", "fighting", S, 80),
    ("Axe Kick", "fighting", P, 120),
    ("Body Press", "fighting", P, 80),
    ("Close Combat", "fighting", P, 120),
    ("Collision Course", "fighting", P, 100),
    ("Cross Chop", "fighting", P, 100),
    ("Double Kick", "fighting", P, 30),
    ("Drain Punch", "fighting", P, 75),
    ("Dynamic Punch", "fighting", P, 100),
    ("Focus Blast", "fighting", S, 120),
    ("Focus Punch", "fighting", P, 150),
    ("Hammer Arm", "fighting", P, 100),
    ("High Jump Kick", "fighting", P, 130),
    ("Mach Punch", "fighting", P, 40),
    ("Power-Up Punch", "fighting", P, 40),
    ("Sacred Sword", "fighting", P, 90),
    ("Secret Sword", "fighting", S, 85),
    ("Sky Uppercut", "fighting", P, 85),
    ("Submission", "fighting", P, 80),
    ("Superpower", "fighting", P, 120),
    ("Triple Arrows", "fighting", P, 90),
    ("Vacuum Wave", "fighting", S, 40),
    ("Low Kick", "fighting", P, 60),
    ("Brick Break", "fighting", P, 75),
    ("Rock Smash", "fighting", P, 40),
    ("Flying Press", "fighting", P, 100),
    ("Meteor Assault", "fighting", P, 150),
    ("Thunderous Kick", "fighting", P, 90),
    ("Rage Fist", "ghost", P, 50),
    ("Combat Torque", "fighting", P, 100),
    ("Bulk Up", "fighting", X, 0),
    ("Coaching", "fighting", X, 0),
    ("Detect", "fighting", X, 0),
    ("Quick Guard", "fighting", X, 0),
    ("No Retreat", "fighting", X, 0),
    # Poison
    ("Acid Spray", "poison", S, 40),
    ("Cross Poison", "poison", P, 70),
    ("Gunk Shot", "poison", P, 120),
    ("Mortal Spin", "poison", P, 30),
    ("Poison Fang", "poison", P, 50),
    ("Poison Jab", "poison", P, 80),
    ("Sludge Bomb", "poison", S, 90),
    ("Sludge Wave", "poison", S, 95),
    ("Sludge", "poison", S, 65),
    ("Venoshock", "poison", S, 65),
    ("Barb Barrage", "poison", P, 60),
    ("Dire Claw", "poison", P, 80),
    ("Malignant Chain", "poison", S, 100),
    ("Noxious Torque", "poison", P, 100),
    ("Clear Smog", "poison", S, 50),
    ("Baneful Bunker", "poison", X, 0),
    ("Coil", "poison", X, 0),
    ("Poison Powder", "poison", X, 0),
    ("Toxic", "poison", X, 0),
    ("Toxic Spikes", "poison", X, 0),
    ("Shelter", "steel", X, 0),
    # Ground
    ("Bone Rush", "ground", P, 25),
    ("Bonemerang", "ground", P, 50),
    ("Drill Run", "ground", P, 80),
    ("Earth Power", "ground", S, 90),
    ("Earthquake", "ground", P, 100),
    ("Headlong Rush", "ground", P, 120),
    ("High Horsepower", "ground", P, 95),
    ("Land's Wrath", "ground", P, 90),
    ("Precipice Blades", "ground", P, 120),
    ("Scorching Sands", "ground", S, 70),
    ("Stomping Tantrum", "ground", P, 75),
    ("Thousand Arrows", "ground", P, 90),
    ("Mud Shot", "ground", S, 55),
    ("Bulldoze", "ground", P, 60),
    ("Sandsear Storm", "ground", S, 100),
    ("Dig", "ground", P, 80),
    ("Spikes", "ground", X, 0),
    ("Sand Attack", "ground", X, 0),
    # Flying
    ("Acrobatics", "flying", P, 55),
    ("Aerial Ace", "flying", P, 60),
    ("Air Slash", "flying", S, 75),
    ("Beak Blast", "flying", P, 100),
    ("Bleakwind Storm", "flying", S, 100),
    ("Brave Bird", "flying", P, 120),
    ("Drill Peck", "flying", P, 80),
    ("Dual Wingbeat", "flying", P, 40),
    ("Hurricane", "flying", S, 110),
    ("Oblivion Wing", "flying", S, 80),
    ("Aeroblast", "flying", S, 100),
    ("Dragon Ascent", "flying", P, 120),
    ("Fly", "flying", P, 90),
    ("Wing Attack", "flying", P, 60),
    ("Gust", "flying", S, 40),
    ("Peck", "flying", P, 35),
    ("Defog", "flying", X, 0),
    ("Roost", "flying", X, 0),
    ("Tailwind", "flying", X, 0),
    ("Feather Dance", "flying", X, 0),
    # Psychic
    ("Esper Wing", "psychic", S, 80),
    ("Expanding Force", "psychic", S, 80),
    ("Extrasensory", "psychic", S, 90),
    ("Future Sight", "psychic", S, 120),
    ("Lumina Crash", "psychic", S, 80),
    ("Luster Purge", "psychic", S, 95),
    ("Mist Ball", "psychic", S, 95),
    ("Photon Geyser", "psychic", S, 100),
    ("Psychic", "psychic", S, 90),
    ("Psychic Fangs", "psychic", P, 85),
    ("Psycho Boost", "psychic", S, 140),
    ("Psycho Cut", "psychic", P, 70),
    ("Psyshock", "psychic", S, 80),
    ("Psystrike", "psychic", S, 100),
    ("Stored Power", "psychic", S, 20),
    ("Zen Headbutt", "psychic", P, 80),
    ("Psyshield Bash", "psychic", P, 70),
    ("Twin Beam", "psychic", S, 40),
    ("Psychic Noise", "psychic", S, 75),
    ("Dream Eater", "psychic", S, 100),
    ("Confusion", "psychic", S, 50),
    ("Agility", "psychic", X, 0),
    ("Calm Mind", "psychic", X, 0),
    ("Cosmic Power", "psychic", X, 0),
    ("Healing Wish", "psychic", X, 0),
    ("Lunar Dance", "psychic", X, 0),
    ("Light Screen", "psychic", X, 0),
    ("Meditate", "psychic", X, 0),
    ("Reflect", "psychic", X, 0),
    ("Rest", "psychic", X, 0),
    ("Trick", "psychic", X, 0),
    ("Trick Room", "psychic", X, 0),
    ("Amnesia", "psychic", X, 0),
    ("Barrier", "psychic", X, 0),
    ("Hypnosis", "psychic", X, 0),
    ("Heal Order", "bug", X, 0),
    ("Magic Coat", "psychic", X, 0),
    ("Ally Switch", "psychic", X, 0),
    ("Take Heart", "psychic", X, 0),
    ("Magic Powder", "psychic", X, 0),
    ("Imprison", "psychic", X, 0),
    # Bug
    ("Attack Order", "bug", P, 90),
    ("Bug Buzz", "bug", S, 90),
    ("First Impression", "bug", P, 90),
    ("Leech Life", "bug", P, 80),
    ("Lunge", "bug", P, 80),
    ("Megahorn", "bug", P, 120),
    ("Pin Missile", "bug", P, 25),
    ("Pollen Puff", "bug", S, 90),
    ("Pounce", "bug", P, 50),
    ("Signal Beam", "bug", S, 75),
    ("U-turn", "bug", P, 70),
    ("X-Scissor", "bug", P, 80),
    ("Bug Bite", "bug", P, 60),
    ("Skitter Smack", "bug", P, 70),
    ("Fell Stinger", "bug", P, 50),
    ("Quiver Dance", "bug", X, 0),
    ("Sticky Web", "bug", X, 0),
    ("Tail Glow", "bug", X, 0),
    ("Rage Powder", "bug", X, 0),
    ("Silk Trap", "bug", X, 0),
    ("Powder", "bug", X, 0),
    ("Defend Order", "bug", X, 0),
    # Rock
    ("Accelerock", "rock", P, 40),
    ("Diamond Storm", "rock", P, 100),
    ("Head Smash", "rock", P, 150),
    ("Meteor Beam", "rock", S, 120),
    ("Power Gem", "rock", S, 80),
    ("Rock Blast", "rock", P, 25),
    ("Rock Slide", "rock", P, 75),
    ("Salt Cure", "rock", P, 40),
    ("Stone Axe", "rock", P, 65),
    ("Stone Edge", "rock", P, 100),
    ("Ancient Power", "rock", S, 60),
    ("Rock Tomb", "rock", P, 60),
    ("Smack Down", "rock", P, 50),
    ("Rock Wrecker", "rock", S, 150),
    ("Rock Polish", "rock", X, 0),
    ("Stealth Rock", "rock", X, 0),
    ("Sandstorm", "rock", X, 0),
    # Ghost
    ("Astral Barrage", "ghost", S, 120),
    ("Bitter Malice", "ghost", S, 75),
    ("Hex", "ghost", S, 65),
    ("Infernal Parade", "ghost", S, 60),
    ("Last Respects", "ghost", P, 50),
    ("Moongeist Beam", "ghost", S, 100),
    ("Phantom Force", "ghost", P, 90),
    ("Poltergeist", "ghost", P, 110),
    ("Shadow Ball", "ghost", S, 80),
    ("Shadow Bone", "ghost", P, 85),
    ("Shadow Claw", "ghost", P, 70),
    ("Shadow Punch", "ghost", P, 60),
    ("Shadow Sneak", "ghost", P, 40),
    ("Spectral Thief", "ghost", P, 90),
    ("Spirit Shackle", "ghost", P, 80),
    ("Shadow Force", "ghost", P, 120),
    ("Hyperspace Fury", "dark", P, 100),
    ("Curse", "ghost", X, 0),
    ("Destiny Bond", "ghost", X, 0),
    ("Pain Split", "normal", X, 0),
    ("Spite", "ghost", X, 0),
    ("Confuse Ray", "ghost", X, 0),
    ("Night Shade", "ghost", S, 1),
    # Dragon
    ("Breaking Swipe", "dragon", P, 60),
    ("Clanging Scales", "dragon", S, 110),
    ("Core Enforcer", "dragon", S, 100),
    ("Draco Meteor", "dragon", S, 130),
    ("Dragon Claw", "dragon", P, 80),
    ("Dragon Darts", "dragon", P, 50),
    ("Dragon Hammer", "dragon", P, 90),
    ("Dragon Pulse", "dragon", S, 85),
    ("Dragon Rush", "dragon", P, 100),
    ("Dragon Tail", "dragon", P, 60),
    ("Dual Chop", "dragon", P, 40),
    ("Dynamax Cannon", "dragon", S, 100),
    ("Fickle Beam", "dragon", S, 80),
    ("Glaive Rush", "dragon", P, 120),
    ("Outrage", "dragon", P, 120),
    ("Scale Shot", "dragon", P, 25),
    ("Spacial Rend", "dragon", S, 100),
    ("Dragon Energy", "dragon", S, 150),
    ("Eternabeam", "dragon", S, 160),
    ("Roar of Time", "dragon", S, 150),
    ("Order Up", "dragon", P, 80),
    ("Dragon Breath", "dragon", S, 60),
    ("Twister", "dragon", S, 40),
    ("Dragon Dance", "dragon", X, 0),
    # Dark
    ("Bite", "dark", P, 60),
    ("Ceaseless Edge", "dark", P, 65),
    ("Crunch", "dark", P, 80),
    ("Dark Pulse", "dark", S, 80),
    ("Darkest Lariat", "dark", P, 85),
    ("Fiery Wrath", "dark", S, 90),
    ("Foul Play", "dark", P, 95),
    ("Jaw Lock", "dark", P, 80),
    ("Knock Off", "dark", P, 65),
    ("Kowtow Cleave", "dark", P, 85),
    ("Lash Out", "dark", P, 75),
    ("Night Daze", "dark", S, 85),
    ("Night Slash", "dark", P, 70),
    ("Power Trip", "dark", P, 20),
    ("Pursuit", "dark", P, 40),
    ("Sucker Punch", "dark", P, 70),
    ("Throat Chop", "dark", P, 80),
    ("Wicked Blow", "dark", P, 75),
    ("Ruination", "dark", S, 1),
    ("Snarl", "dark", S, 55),
    ("Assurance", "dark", P, 60),
    ("Payback", "dark", P, 50),
    ("Thief", "dark", P, 60),
    ("Wicked Torque", "dark", P, 80),
    ("Nasty Plot", "dark", X, 0),
    ("Parting Shot", "dark", X, 0),
    ("Switcheroo", "dark", X, 0),
    ("Taunt", "dark", X, 0),
    ("Obstruct", "dark", X, 0),
    ("Memento", "dark", X, 0),
    ("Topsy-Turvy", "dark", X, 0),
    # Steel
    ("Anchor Shot", "steel", P, 80),
    ("Behemoth Bash", "steel", P, 100),
    ("Behemoth Blade", "steel", P, 100),
    ("Bullet Punch", "steel", P, 40),
    ("Doom Desire", "steel", S, 140),
    ("Flash Cannon", "steel", S, 80),
    ("Gear Grind", "steel", P, 50),
    ("Gigaton Hammer", "steel", P, 160),
    ("Gyro Ball", "steel", P, 1),
    ("Heavy Slam", "steel", P, 1),
    ("Iron Head", "steel", P, 80),
    ("Iron Tail", "steel", P, 100),
    ("Make It Rain", "steel", S, 120),
    ("Meteor Mash", "steel", P, 90),
    ("Smart Strike", "steel", P, 70),
    ("Spin Out", "steel", P, 100),
    ("Steel Beam", "steel", S, 140),
    ("Sunsteel Strike", "steel", P, 100),
    ("Steel Roller", "steel", P, 130),
    ("Tachyon Cutter", "steel", S, 50),
    ("Mirror Shot", "steel", S, 65),
    ("Magnet Bomb", "steel", P, 60),
    ("Metal Claw", "steel", P, 50),
    ("Autotomize", "steel", X, 0),
    ("Iron Defense", "steel", X, 0),
    ("King's Shield", "steel", X, 0),
    ("Metal Sound", "steel", X, 0),
    ("Shift Gear", "steel", X, 0),
    ("Gear Up", "steel", X, 0),
    # Fairy
    ("Dazzling Gleam", "fairy", S, 80),
    ("Disarming Voice", "fairy", S, 40),
    ("Draining Kiss", "fairy", S, 50),
    ("Fleur Cannon", "fairy", S, 130),
    ("Light of Ruin", "fairy", S, 140),
    ("Moonblast", "fairy", S, 95),
    ("Play Rough", "fairy", P, 90),
    ("Spirit Break", "fairy", P, 75),
    ("Strange Steam", "fairy", S, 90),
    ("Springtide Storm", "fairy", S, 100),
    ("Alluring Voice", "fairy", S, 80),
    ("Magical Torque", "fairy", P, 100),
    ("Misty Explosion", "fairy", S, 100),
    ("Charm", "fairy", X, 0),
    ("Geomancy", "fairy", X, 0),
    ("Moonlight", "fairy", X, 0),
    ("Floral Healing", "fairy", X, 0),
    ("Decorate", "fairy", X, 0),
    ("Misty Terrain", "fairy", X, 0),
    ("Sweet Kiss", "fairy", X, 0),
    # Terrain and field
    ("Electric Terrain", "electric", X, 0),
    ("Grassy Terrain", "grass", X, 0),
    ("Psychic Terrain", "psychic", X, 0),
    ("Morning Sun", "normal", X, 0),
    ("Fling", "dark", P, 1),
]


def _build_table() -> Mapping[str, MoveData]:
    table: Dict[str, MoveData] = {}
    for name, move_type, category, power in _ENTRIES:
        table[to_id(name)] = MoveData(name, power, move_type, category)
    return MappingProxyType(table)


MOVE_TABLE: Mapping[str, MoveData] = _build_table()


def get_move_data(move_name: str) -> Optional[MoveData]:
    """Get move data by name.

    Args:
        move_name: Move name (case and punctuation insensitive)

    Returns:
        MoveData or None if not found
    """
    return MOVE_TABLE.get(to_id(move_name))
