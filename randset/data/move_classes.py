"""Named move classes.

Membership sets used by the analyzer and validators. All ids are
normalized (see `to_id`).
"""

from typing import FrozenSet


def _ids(names: str) -> FrozenSet[str]:
    return frozenset(names.split())


# ====================
# Setup
# ====================

PHYSICAL_SETUP = _ids(
    "bellydrum bulkup coil curse dragondance honeclaws howl meditate "
    "poweruppunch swordsdance shiftgear victorydance"
)

SPECIAL_SETUP = _ids(
    "calmmind chargebeam geomancy nastyplot quiverdance tailglow takeheart torchsong"
)

MIXED_SETUP = _ids(
    "growth happyhour holdhands celebrate shellsmash workup clangoroussoul "
    "noretreat filletaway"
)

SPEED_SETUP = _ids("agility autotomize flamecharge rockpolish trailblaze")

# ====================
# Field and support
# ====================

HAZARDS = _ids("spikes stealthrock stickyweb toxicspikes stoneaxe ceaselessedge")

# Most valuable first; only the best present hazard setter is kept
HAZARD_PREFERENCE = ("stealthrock", "stickyweb", "spikes", "toxicspikes")

HAZARD_REMOVAL = _ids("defog rapidspin mortalspin courtchange tidyup")

# Most valuable first; only the best present removal move is kept
REMOVAL_PREFERENCE = ("defog", "rapidspin", "mortalspin", "courtchange", "tidyup")

RECOVERY = _ids(
    "healorder milkdrink moonlight morningsun recover roost shoreup slackoff "
    "softboiled synthesis wish strengthsap junglehealing lifedew"
)

SCREENS = _ids("auroraveil lightscreen reflect")

SCREEN_PAIR = ("lightscreen", "reflect")

STATUS_INFLICTION = _ids("willowisp thunderwave toxic glare")

PROTECT = _ids(
    "protect detect kingsshield spikyshield banefulbunker obstruct silktrap "
    "burningbulwark"
)

# ====================
# Attacking move traits
# ====================

PRIORITY = _ids(
    "accelerock aquajet bulletpunch extremespeed fakeout feint firstimpression "
    "iceshard machpunch quickattack shadowsneak suckerpunch vacuumwave "
    "watershuriken jetpunch grassyglide thunderclap"
)

# Priority moves the validator drops once a physical/mixed setup is committed
SETUP_INCOMPATIBLE_PRIORITY = _ids(
    "aquajet machpunch bulletpunch iceshard shadowsneak suckerpunch extremespeed"
)

# Moves that count toward STAB even without a type match
NO_STAB = _ids(
    "accelerock aquajet bulletpunch explosion extremespeed fakeout feint "
    "firstimpression flamecharge iceshard machpunch pursuit quickattack "
    "selfdestruct shadowsneak suckerpunch vacuumwave watershuriken"
)

# Keeps a set viable with no STAB move at all
STAB_EXEMPT_SIGNATURE = "knockoff"

RECOIL = _ids(
    "bravebird doubleedge flareblitz headcharge headsmash submission takedown "
    "volttackle wildcharge woodhammer wavecrash headlongrush supercellslam"
)

PIVOT = _ids("batonpass flipturn partingshot teleport uturn voltswitch shedtail")

# Pivot moves subject to validation; baton pass is a setup passer
VALIDATED_PIVOT = _ids("uturn voltswitch flipturn partingshot teleport")

DRAIN = _ids(
    "absorb drainpunch drainingkiss dreameater gigadrain hornleech leechlife "
    "megadrain oblivionwing paraboliccharge bitterblade matchagotcha"
)

SOUND = _ids(
    "boomburst bugbuzz clangoroussoul disarmingvoice echoedvoice grasswhistle "
    "growl hypervoice metalsound nobleroar overdrive perishsong relicsong round "
    "screech sing snore sparklingaria supersonic uproar torchsong alluringvoice "
    "psychicnoise clangingscales"
)

PUNCH = _ids(
    "bulletpunch cometpunch dizzypunch drainpunch dynamicpunch firepunch "
    "focuspunch hammerarm icepunch machpunch megapunch meteormash plasmafists "
    "poweruppunch shadowpunch skyuppercut thunderpunch jetpunch ragefist"
)

BITE = _ids(
    "bite crunch firefang fishiousrend hyperfang icefang jawlock poisonfang "
    "psychicfangs thunderfang"
)

PULSE = _ids("aurasphere darkpulse dragonpulse originpulse waterpulse terrainpulse")

MULTI_HIT = _ids(
    "armthrust barrage bonemerang bonerush bulletseed cometpunch doublehit "
    "doublekick doubleslap dualchop furyattack furyswipes geargrind iciclespear "
    "pinmissile rockblast scaleshot spikecannon tailslap watershuriken "
    "populationbomb tripleaxel dualwingbeat dragondarts surgingstrikes"
)

# Moves whose power drops in exchange for a stat drop on the user
CONTRARY = _ids(
    "closecombat dracometeor hammerarm hyperspacefury leafstorm overheat "
    "psychoboost superpower vcreate fleurcannon makeitrain armorcannon "
    "spinout headlongrush"
)

SHEER_FORCE = _ids(
    "airslash ancientpower bite blazekick blizzard bodyslam bugbuzz chargebeam "
    "crunch crosspoison darkpulse discharge dragonrush dynamicpunch earthpower "
    "energyball extrasensory fireblast firefang firepunch flamecharge "
    "flamethrower flashcannon flareblitz focusblast gunkshot heatwave hurricane "
    "icebeam icefang icepunch ironhead lavaplume "
    "liquidation meteormash mudshot muddywater nightdaze playrough poisonfang "
    "poisonjab psychic rockslide scald shadowball sludgebomb "
    "sludgewave steameruption stoneedge thunder thunderbolt thunderfang "
    "thunderpunch triattack waterfall zenheadbutt moonblast poweruppunch "
    "iciclecrash fierywrath bleakwindstorm sandsearstorm springtidestorm "
    "wildboltstorm esperwing triplearrows direclaw barbbarrage saltcure "
    "spiritbreak luminacrash mysticalfire snarl icywind "
    "electroweb rocktomb bulldoze trailblaze lunge nuzzle"
)

CONTACT = _ids(
    "accelerock aquajet aquatail bite bodypress bodyslam bravebird bulletpunch "
    "closecombat crabhammer crosschop crunch darkestlariat doubleedge "
    "doublekick dragonclaw dragonhammer dragonrush drainpunch drillpeck "
    "drillrun dualchop dualwingbeat dynamicpunch extremespeed facade fakeout "
    "firefang firepunch firstimpression fishiousrend flamecharge flareblitz "
    "flipturn focuspunch foulplay gigaimpact grassyglide gyroball hammerarm "
    "headcharge headsmash heavyslam highhorsepower highjumpkick hornleech "
    "icefang icepunch iceshard icespinner iciclecrash ironhead irontail "
    "jawlock jetpunch knockoff lashout leafblade leechlife liquidation "
    "lowkick machpunch megahorn meteormash nightslash nuzzle outrage "
    "playrough poisonfang poisonjab powertrip poweruppunch powerwhip "
    "psychicfangs quickattack rapidspin return sacredsword seedbomb "
    "shadowclaw shadowpunch shadowsneak skyuppercut smartstrike spiritbreak "
    "submission suckerpunch sunsteelstrike superpower tackle takedown "
    "thunderfang thunderpunch throatchop triplearrows tripleaxel uturn "
    "volttackle waterfall wavecrash wildcharge woodhammer xscissor "
    "zenheadbutt zingzap axekick collisioncourse ragefist kowtowcleave "
    "wickedblow surgingstrikes supercellslam glaiverush ragingfury "
    "bitterblade flowertrick temperflare"
)

# Choice items lock the holder into one move; these moves want to switch
CHOICE_INCOMPATIBLE = _ids(
    "dragontail fakeout firstimpression flamecharge rapidspin partingshot "
    "healingwish switcheroo trick"
)

# Pairs that may never share a set, even when backfilling
HARD_CONFLICTS = (
    frozenset(("bellydrum", "substitute")),
)
