"""
Identifier spaces for abilities, unit types, upgrades, buffs and effects.

Each enum is a subset of the engine's integer space. Engine patches add
codes these enums do not know about; catalog decoding drops records whose
code does not resolve instead of failing (see sc2link.data.game_data).
"""

from enum import IntEnum

from sc2link.data.enum_utils import NumericParseableEnum


class AbilityId(NumericParseableEnum, IntEnum):
    INVALID = 0
    SMART = 1
    STOP_STOP = 4
    MOVE_MOVE = 16
    ATTACK_ATTACK = 23
    RESEARCH_INTERCEPTORGRAVITONCATAPULT = 44
    MORPHZERGLINGTOBANELING_BANELING = 80
    NEXUSTRAINMOTHERSHIP_MOTHERSHIP = 110
    RESEARCH_GLIALREGENERATION = 216
    RESEARCH_TUNNELINGCLAWS = 217
    RESEARCH_CHITINOUSPLATING = 265
    TERRANBUILD_COMMANDCENTER = 318
    TERRANBUILD_SUPPLYDEPOT = 319
    TERRANBUILD_REFINERY = 320
    TERRANBUILD_BARRACKS = 321
    TERRANBUILD_ENGINEERINGBAY = 322
    TERRANBUILD_MISSILETURRET = 323
    TERRANBUILD_BUNKER = 324
    TERRANBUILD_SENSORTOWER = 326
    TERRANBUILD_GHOSTACADEMY = 327
    TERRANBUILD_FACTORY = 328
    TERRANBUILD_STARPORT = 329
    TERRANBUILD_ARMORY = 331
    TERRANBUILD_FUSIONCORE = 333
    EFFECT_STIM_MARINE = 380
    SIEGEMODE_SIEGEMODE = 388
    MORPH_VIKINGASSAULTMODE = 403
    MORPH_VIKINGFIGHTERMODE = 405
    BUILD_TECHLAB_BARRACKS = 421
    BUILD_REACTOR_BARRACKS = 422
    BUILD_TECHLAB_FACTORY = 454
    BUILD_REACTOR_FACTORY = 455
    BUILD_TECHLAB_STARPORT = 487
    BUILD_REACTOR_STARPORT = 488
    COMMANDCENTERTRAIN_SCV = 524
    MORPH_SUPPLYDEPOT_LOWER = 556
    BARRACKSTRAIN_MARINE = 560
    BARRACKSTRAIN_REAPER = 561
    BARRACKSTRAIN_GHOST = 562
    BARRACKSTRAIN_MARAUDER = 563
    FACTORYTRAIN_SIEGETANK = 591
    FACTORYTRAIN_THOR = 594
    FACTORYTRAIN_HELLION = 595
    FACTORYTRAIN_HELLBAT = 596
    TRAIN_CYCLONE = 597
    FACTORYTRAIN_WIDOWMINE = 614
    STARPORTTRAIN_MEDIVAC = 620
    STARPORTTRAIN_BANSHEE = 621
    STARPORTTRAIN_RAVEN = 622
    STARPORTTRAIN_BATTLECRUISER = 623
    STARPORTTRAIN_VIKINGFIGHTER = 624
    STARPORTTRAIN_LIBERATOR = 626
    RESEARCH_HISECAUTOTRACKING = 650
    RESEARCH_TERRANSTRUCTUREARMORUPGRADE = 651
    ENGINEERINGBAYRESEARCH_TERRANINFANTRYWEAPONSLEVEL1 = 652
    ENGINEERINGBAYRESEARCH_TERRANINFANTRYWEAPONSLEVEL2 = 653
    ENGINEERINGBAYRESEARCH_TERRANINFANTRYWEAPONSLEVEL3 = 654
    RESEARCH_NEOSTEELFRAME = 655
    ENGINEERINGBAYRESEARCH_TERRANINFANTRYARMORLEVEL1 = 656
    ENGINEERINGBAYRESEARCH_TERRANINFANTRYARMORLEVEL2 = 657
    ENGINEERINGBAYRESEARCH_TERRANINFANTRYARMORLEVEL3 = 658
    BUILD_NUKE = 710
    RESEARCH_STIMPACK = 730
    RESEARCH_COMBATSHIELD = 731
    RESEARCH_CONCUSSIVESHELLS = 732
    PROTOSSBUILD_NEXUS = 880
    PROTOSSBUILD_PYLON = 881
    PROTOSSBUILD_ASSIMILATOR = 882
    PROTOSSBUILD_GATEWAY = 883
    PROTOSSBUILD_FORGE = 884
    PROTOSSBUILD_FLEETBEACON = 885
    PROTOSSBUILD_TWILIGHTCOUNCIL = 886
    PROTOSSBUILD_PHOTONCANNON = 887
    PROTOSSBUILD_STARGATE = 889
    PROTOSSBUILD_TEMPLARARCHIVE = 890
    PROTOSSBUILD_DARKSHRINE = 891
    PROTOSSBUILD_ROBOTICSBAY = 892
    PROTOSSBUILD_ROBOTICSFACILITY = 893
    PROTOSSBUILD_CYBERNETICSCORE = 894
    GATEWAYTRAIN_ZEALOT = 916
    GATEWAYTRAIN_STALKER = 917
    GATEWAYTRAIN_HIGHTEMPLAR = 919
    GATEWAYTRAIN_DARKTEMPLAR = 920
    GATEWAYTRAIN_SENTRY = 921
    TRAIN_ADEPT = 922
    STARGATETRAIN_PHOENIX = 946
    STARGATETRAIN_CARRIER = 948
    STARGATETRAIN_VOIDRAY = 950
    STARGATETRAIN_ORACLE = 954
    STARGATETRAIN_TEMPEST = 955
    ROBOTICSFACILITYTRAIN_WARPPRISM = 976
    ROBOTICSFACILITYTRAIN_OBSERVER = 977
    ROBOTICSFACILITYTRAIN_COLOSSUS = 978
    ROBOTICSFACILITYTRAIN_IMMORTAL = 979
    TRAIN_DISRUPTOR = 994
    NEXUSTRAIN_PROBE = 1006
    EFFECT_PSISTORM = 1036
    BUILD_INTERCEPTORS = 1042
    ZERGBUILD_HATCHERY = 1152
    ZERGBUILD_EXTRACTOR = 1154
    ZERGBUILD_SPAWNINGPOOL = 1155
    ZERGBUILD_EVOLUTIONCHAMBER = 1156
    ZERGBUILD_HYDRALISKDEN = 1157
    ZERGBUILD_SPIRE = 1158
    ZERGBUILD_ULTRALISKCAVERN = 1159
    ZERGBUILD_INFESTATIONPIT = 1160
    ZERGBUILD_NYDUSNETWORK = 1161
    ZERGBUILD_BANELINGNEST = 1162
    ZERGBUILD_ROACHWARREN = 1165
    ZERGBUILD_SPINECRAWLER = 1166
    ZERGBUILD_SPORECRAWLER = 1167
    MORPH_LAIR = 1216
    UPGRADETOHIVE_HIVE = 1218
    UPGRADETOGREATERSPIRE_GREATERSPIRE = 1220
    RESEARCH_PNEUMATIZEDCARAPACE = 1223
    RESEARCH_BURROW = 1225
    RESEARCH_ZERGLINGADRENALGLANDS = 1252
    RESEARCH_ZERGLINGMETABOLICBOOST = 1253
    LARVATRAIN_DRONE = 1342
    LARVATRAIN_ZERGLING = 1343
    LARVATRAIN_OVERLORD = 1344
    LARVATRAIN_HYDRALISK = 1345
    LARVATRAIN_MUTALISK = 1346
    LARVATRAIN_ULTRALISK = 1348
    LARVATRAIN_ROACH = 1351
    LARVATRAIN_INFESTOR = 1352
    LARVATRAIN_CORRUPTOR = 1353
    LARVATRAIN_VIPER = 1354
    TRAIN_SWARMHOST = 1356
    MORPHTOBROODLORD_BROODLORD = 1372
    MORPH_OVERSEER = 1448
    UPGRADETOPLANETARYFORTRESS_PLANETARYFORTRESS = 1450
    MORPH_ORBITALCOMMAND = 1516
    RESEARCH_WARPGATE = 1568
    RESEARCH_BLINK = 1593
    RESEARCH_CHARGE = 1594
    TRAINQUEEN_QUEEN = 1632
    BUILD_CREEPTUMOR_QUEEN = 1694
    BUILDAUTOTURRET_AUTOTURRET = 1764
    MORPHTORAVAGER_RAVAGER = 2330
    MORPH_LURKER = 2332
    BURROWDOWN = 3661
    BURROWUP = 3662
    STOP = 3665
    HARVEST_GATHER = 3666
    HARVEST_RETURN = 3667
    LOAD = 3668
    UNLOADALLAT = 3669
    CANCEL_LAST = 3671
    ATTACK = 3674
    BUILD_TECHLAB = 3682
    BUILD_REACTOR = 3683
    HOLDPOSITION = 3793
    MOVE = 3794
    PATROL = 3795


class UnitTypeId(NumericParseableEnum, IntEnum):
    NOTAUNIT = 0
    COLOSSUS = 4
    TECHLAB = 5
    REACTOR = 6
    BANELING = 9
    MOTHERSHIP = 10
    CHANGELING = 12
    COMMANDCENTER = 18
    SUPPLYDEPOT = 19
    REFINERY = 20
    BARRACKS = 21
    ENGINEERINGBAY = 22
    MISSILETURRET = 23
    BUNKER = 24
    SENSORTOWER = 25
    GHOSTACADEMY = 26
    FACTORY = 27
    STARPORT = 28
    ARMORY = 29
    FUSIONCORE = 30
    AUTOTURRET = 31
    SIEGETANKSIEGED = 32
    SIEGETANK = 33
    VIKINGASSAULT = 34
    VIKINGFIGHTER = 35
    COMMANDCENTERFLYING = 36
    BARRACKSTECHLAB = 37
    BARRACKSREACTOR = 38
    FACTORYTECHLAB = 39
    FACTORYREACTOR = 40
    STARPORTTECHLAB = 41
    STARPORTREACTOR = 42
    FACTORYFLYING = 43
    STARPORTFLYING = 44
    SCV = 45
    BARRACKSFLYING = 46
    SUPPLYDEPOTLOWERED = 47
    MARINE = 48
    REAPER = 49
    GHOST = 50
    MARAUDER = 51
    THOR = 52
    HELLION = 53
    MEDIVAC = 54
    BANSHEE = 55
    RAVEN = 56
    BATTLECRUISER = 57
    NUKE = 58
    NEXUS = 59
    PYLON = 60
    ASSIMILATOR = 61
    GATEWAY = 62
    FORGE = 63
    FLEETBEACON = 64
    TWILIGHTCOUNCIL = 65
    PHOTONCANNON = 66
    STARGATE = 67
    TEMPLARARCHIVE = 68
    DARKSHRINE = 69
    ROBOTICSBAY = 70
    ROBOTICSFACILITY = 71
    CYBERNETICSCORE = 72
    ZEALOT = 73
    STALKER = 74
    HIGHTEMPLAR = 75
    DARKTEMPLAR = 76
    SENTRY = 77
    PHOENIX = 78
    CARRIER = 79
    VOIDRAY = 80
    WARPPRISM = 81
    OBSERVER = 82
    IMMORTAL = 83
    PROBE = 84
    INTERCEPTOR = 85
    HATCHERY = 86
    CREEPTUMOR = 87
    EXTRACTOR = 88
    SPAWNINGPOOL = 89
    EVOLUTIONCHAMBER = 90
    HYDRALISKDEN = 91
    SPIRE = 92
    ULTRALISKCAVERN = 93
    INFESTATIONPIT = 94
    NYDUSNETWORK = 95
    BANELINGNEST = 96
    ROACHWARREN = 97
    SPINECRAWLER = 98
    SPORECRAWLER = 99
    LAIR = 100
    HIVE = 101
    GREATERSPIRE = 102
    EGG = 103
    DRONE = 104
    ZERGLING = 105
    OVERLORD = 106
    HYDRALISK = 107
    MUTALISK = 108
    ULTRALISK = 109
    ROACH = 110
    INFESTOR = 111
    CORRUPTOR = 112
    BROODLORD = 114
    QUEEN = 126
    OVERSEER = 129
    PLANETARYFORTRESS = 130
    ORBITALCOMMAND = 132
    LARVA = 151
    ADEPT = 311
    MINERALFIELD = 341
    VESPENEGEYSER = 342
    MINERALFIELD750 = 483
    HELLIONTANK = 484
    SWARMHOSTMP = 494
    ORACLE = 495
    TEMPEST = 496
    WIDOWMINE = 498
    VIPER = 499
    LURKERMP = 502
    RAVAGER = 688
    LIBERATOR = 689
    CYCLONE = 692
    DISRUPTOR = 694


class UpgradeId(NumericParseableEnum, IntEnum):
    NULL = 0
    CARRIERLAUNCHSPEEDUPGRADE = 1
    GLIALREGENERATION = 2
    GLIALRECONSTITUTION = 3
    TUNNELINGCLAWS = 4
    CHITINOUSPLATING = 5
    HISECAUTOTRACKING = 6
    TERRANBUILDINGARMOR = 7
    TERRANINFANTRYWEAPONSLEVEL1 = 8
    TERRANINFANTRYWEAPONSLEVEL2 = 9
    TERRANINFANTRYWEAPONSLEVEL3 = 10
    NEOSTEELFRAME = 11
    TERRANINFANTRYARMORSLEVEL1 = 12
    TERRANINFANTRYARMORSLEVEL2 = 13
    TERRANINFANTRYARMORSLEVEL3 = 14
    STIMPACK = 15
    SHIELDWALL = 16
    PUNISHERGRENADES = 17
    OVERLORDSPEED = 62
    BURROW = 64
    ZERGLINGATTACKSPEED = 65
    ZERGLINGMOVEMENTSPEED = 66
    WARPGATERESEARCH = 84
    CHARGE = 86
    BLINKTECH = 87


class BuffId(NumericParseableEnum, IntEnum):
    NULL = 0
    RADAR25 = 1
    TAUNTB = 2
    DISABLEABILS = 3
    TRANSIENTMORPH = 4
    GRAVITONBEAM = 5
    GHOSTCLOAK = 6
    BANSHEECLOAK = 7
    POWERUSERWARPABLE = 8
    VORTEXBEHAVIORENEMY = 9
    CORRUPTION = 10
    QUEENSPAWNLARVATIMER = 11
    GHOSTHOLDFIRE = 12
    GHOSTHOLDFIREB = 13
    LEECH = 14
    LEECHDISABLEABILITIES = 15
    EMPDECLOAK = 16
    FUNGALGROWTH = 17
    GUARDIANSHIELD = 18
    STIMPACKMARAUDER = 24
    STIMPACK = 27
    CARRYMINERALFIELDMINERALS = 271
    CARRYHARVESTABLEVESPENEGEYSERGAS = 273
    CHRONOBOOSTENERGYCOST = 281


class EffectId(NumericParseableEnum, IntEnum):
    NULL = 0
    PSISTORMPERSISTENT = 1
    GUARDIANSHIELDPERSISTENT = 2
    TEMPORALFIELDGROWINGBUBBLECREATEPERSISTENT = 3
    TEMPORALFIELDAFTERBUBBLECREATEPERSISTENT = 4
    THERMALLANCESFORWARD = 5
    SCANNERSWEEP = 6
    NUKEPERSISTENT = 7
    LIBERATORTARGETMORPHDELAYPERSISTENT = 8
    LIBERATORTARGETMORPHPERSISTENT = 9
    BLINDINGCLOUDCP = 10
    RAVAGERCORROSIVEBILECP = 11
    LURKERMP = 12
