"""Bundled artwork: the star sprite and the palette it is drawn with."""

from __future__ import annotations

from functools import lru_cache

from spritestack.palette import Palette
from spritestack.sprite import Sprite

STAR_WIDTH = 48
STAR_HEIGHT = 48
STAR_SIZE = 2306
SIZEOF_GLOBAL_PALETTE = 302
SPRITES_PALETTE_OFFSET = 0

_BLANK = "02" * 32

# Width byte, height byte, then the pixels, 32 bytes per entry.
_STAR_HEX = (
    "3030" + "02" * 30,
    _BLANK,
    _BLANK,
    "02" * 24 + "1b04041b" + "02" * 4,
    _BLANK,
    "02" * 7 + "182c42422c18" + "02" * 19,
    "02" * 22 + "2e0a446868440a2e" + "0202",
    _BLANK,
    "02" * 5 + "180064758e8e76640018" + "02" * 17,
    "02" * 20 + "142443778091918077432414",
    _BLANK,
    "02" * 4 + "00325d8e919191918e5d3900" + "02" * 16,
    "02" * 20 + "003e678e919191918e673e00",
    _BLANK,
    "02" * 3 + "0d485f7f8e919191918e7f5f480d" + "02" * 15,
    "02" * 19 + "005c6d" + "91" * 8 + "6d5c",
    "00" + "02" * 31,
    "02" * 2 + "19006475" + "91" * 8 + "75640019" + "02" * 14,
    "02" * 17 + "0f28528083" + "91" * 8 + "8380",
    "52280f" + "02" * 29,
    "02" + "0632608e" + "91" * 10 + "8e603906" + "02" * 13,
    "02" * 12 + "1b0000000000" + "3d678e" + "91" * 10 + "8e",
    "673d00000000001b" + "02" * 16 + "0b070703285b6262",
    "637b838e8e" + "91" * 10 + "8e8e837b6362625b280307070b" + "02" * 4,
    "02" * 7 + "18333d4249596d7676768e" + "91" * 14,
    "91918e7676766d5949423d3318" + "02" * 9 + "1d08566268838e919191",
    "91" * 8 + "92" * 4 + "91" * 10 + "8e8e83686256081d" + "0202",
    "02" * 6 + "3165828e8e" + "91" * 8 + "8e918e8e8e8b93938b918e8e8e",
    "91" * 8 + "8e8e8e826531" + "02" * 8 + "266082" + "91" * 7,
    "9191918e" + "54504e858b93938b854e5054" + "8e" + "91" * 10 + "826026" + "0202",
    "02" * 6 + "23517b" + "91" * 9 + "928f" + "2d303b868c93938c863b302d",
    "8f92" + "91" * 9 + "815123" + "02" * 8 + "1d006e" + "91" * 7,
    "91918b93" + "06470196" + "93" * 4 + "96014b06" + "938b" + "91" * 6 + "8e9191" + "6e001d" + "0202",
    "02" * 7 + "00465a7083" + "91" * 6 + "8f90" + "05142d87" + "93" * 4 + "872d1405",
    "908f" + "91" * 6 + "83705a4600" + "02" * 10 + "0e204563787e7e8e91",
    "9191918e" + "050000889493939488000005" + "8e" + "91" * 4 + "8e7e7e786345200e" + "02" * 3,
    "02" * 8 + "06265c65676783" + "91" * 4 + "8e" + "050000838b93938b84000005",
    "8e" + "91" * 4 + "836767655c260636" + "02" * 12 + "1c115b61676976",
    "8e91918e" + "2d1500838b93938b8400152d" + "8e919191" + "766967615b111c35" + "02" * 4,
    "02" * 10 + "133f51626572" + "919191" + "8e" + "381f1084908c8c9084101f2f",
    "8e919191726562513f133c" + "02" * 16 + "06275c6572",
    "9191918e" + "252122859191919185222125" + "92919191" + "72655c270636" + "02" * 6,
    "02" * 12 + "1c056172" + "919191" + "8e" + "7c7c7c" + "8e" + "91" * 4 + "8e" + "7c7c7c",
    "8e9191917261051c" + "02" * 20 + "1b006b7d",
    "8e" + "91" * 19 + "7d6c001b" + "02" * 8,
    "02" * 12 + "1c037a" + "91" * 17,
    "91" * 5 + "7a031c" + "02" * 19 + "0c275c8391",
    "91" * 21 + "835c270c" + "02" * 7,
    "02" * 11 + "0c316283" + "91" * 17,
    "91" * 5 + "8362310c" + "02" * 18 + "0c3a698391",
    "91" * 21 + "83693a0c" + "02" * 7,
    "02" * 11 + "0640" + "91" * 8 + "8e" + "91" * 10,
    "91" * 7 + "4006" + "02" * 17 + "0f1e4d919191",
    "91" * 5 + "78" + "70" * 8 + "78" + "91" * 8 + "4d1e0f" + "02" * 6,
    "02" * 10 + "002e54" + "91" * 6 + "8e7f7165645c55555c6465717f",
    "8e" + "91" * 6 + "542e00" + "02" * 16 + "002e54919191",
    "919191" + "8e" + "6767655c390000395c656767" + "8e" + "91" * 6 + "542e00" + "02" * 6,
    "02" * 10 + "002e54" + "919191" + "8e" + "6f6a6a5d4316121a" + "0202" + "1a1216435d",
    "6a6a6f8e91918e542e00" + "02" * 16 + "131d4a787877",
    "7357534c432913" + "02" * 6 + "1329434c535773" + "777878" + "4a1d13" + "02" * 6,
    "02" * 11 + "06396565625c3719000017" + "02" * 8 + "1700",
    "0019375c6265673906" + "02" * 19 + "1c090909",
    "090615" + "02" * 14 + "1506090909091c" + "02" * 8,
    *([_BLANK] * 9),
    "0202",
)

# Little-endian 16-bit entries, ten per line.
_PALETTE_HEX = (
    "0000ffff107c0084018420042104218420082088",
    "40084288420c428c438c630ca78c601060906490",
    "84108490801485949a514a594a498a698c518c61",
    "c6980a99c79cb39dd21dc1a0e2a0d2a1e024e0a4",
    "e1a4e2a4012502250325282529258d258e250029",
    "00a901a920292aa94a2949a98d29202d21ad342e",
    "e9b020b1403140b183b140b5603560b961b984b9",
    "c839ceb9a03de33de53def3da0c107c28e4207c6",
    "6b46e049e0c9e2c948ca004e215224d244526352",
    "66522056405a40da605a82da60de60e2806280e2",
    "80e6a066a06aa0eac06ac1eae16ae3ea036b03eb",
    "666be1ee026f226f236f446f666f23f3437344f3",
    "647364f3867386f3a7f364f78477857785f786f7",
    "a677a6f7a7f7c777c977907b8dfb90fba6fbabfb",
    "acfbadfbc67bc87bc97bc6fbc7fb90ffaf7fb07f",
    "b17f",
)


@lru_cache(maxsize=None)
def star_sprite() -> Sprite:
    """The 48x48 star used as every layer of the demo object."""
    raw = bytes.fromhex("".join(_STAR_HEX))
    if len(raw) != STAR_SIZE:
        raise ValueError(f"star data holds {len(raw)} bytes, expected {STAR_SIZE}")
    return Sprite.from_bytes(raw)


@lru_cache(maxsize=None)
def global_palette() -> Palette:
    """The palette the star sprite's indices refer to."""
    raw = bytes.fromhex("".join(_PALETTE_HEX))
    if len(raw) != SIZEOF_GLOBAL_PALETTE:
        raise ValueError(f"palette data holds {len(raw)} bytes, expected {SIZEOF_GLOBAL_PALETTE}")
    return Palette.from_bytes(raw)