#!/usr/bin/env python3
import threading
from aslbits import BitBuffer
import aslgeo as geo

LUT_BITS = 40

# flag:geohash pairs, roughly one point per country
POI = (
    "🇦🇨:7wtfc36k7311|🇦🇩:sp91fdh1hs8k|🇦🇪:thnm324z28tz|🇦🇫:tw01hf2vt6g3|🇦🇬:deh11cc4re8k|🇦🇮:de5psufyen52|"
    "🇦🇱:srq64gwp77nk|🇦🇲:tp05by7g6jeg|🇦🇴:kqh8q8x7s13g|🇦🇶:d00000000000|🇦🇷:69y7pkxff4gc|🇦🇸:2jrnbd192kuc|"
    "🇦🇹:u2edk85115y4|🇦🇺:qgx0hnujcy27|🇦🇼:d6nppz6ssqnn|🇦🇽:u6wnm5nj5j7x|🇦🇿:tp5myu215xkz|🇧🇦:sru9f69s8vh7|"
    "🇧🇧:ddmej1cunchp|🇧🇩:wh0r3qs35cw7|🇧🇪:u151710b3yyw|🇧🇫:efnvs7yvk06x|🇧🇬:sx8dfsy|🇧🇭:theuq9k98ch6|"
    "🇧🇮:kxmkbcfq2bsf|🇧🇯:s19suwqm6119|🇧🇱:ddgr4pyhjupw|🇧🇲:dt9zy3rns6qt|🇧🇳:w8c9f9whj1jw|🇧🇴:6mpe3fmn9q87|"
    "🇧🇶:d6pmqkkjbffu|🇧🇷:6vjyjr7428nh|🇧🇸:dk2yqv3er7zb|🇧🇹:tuzkt0b9cdxk|🇧🇻:u4f7hb8nybjt|🇧🇼:ks18cxnzpcgt|"
    "🇧🇾:u9e9e98dm27k|🇧🇿:d50cgcqdqv95|🇨🇦:f244mkwzrmk9|🇨🇨:mjz6zc867uv2|🇨🇩:krr3p0u5nqqd|🇨🇫:s3jjwed8kn27|"
    "🇨🇬:krgq8nmru1sx|🇨🇭:u0m636zpbcpc|🇨🇮:eck4cu8exjy7|🇨🇰:2hppntbx22nn|🇨🇱:66jc8m77rmc3|🇨🇲:s28jvsx84r5q|"
    "🇨🇳:wx4g0bm6c408|🇨🇴:d2g6f3qmdzxh|🇨🇵:dezuwjygz2zm|🇨🇷:d1u0qxq7q7gp|🇨🇺:dhj7mxwqrp7d|🇨🇻:e6xjyz50ncp1|"
    "🇨🇼:d6nvnp7j03z7|🇨🇽:6w5u8fhdbscd|🇨🇾:swpzbdwfj5s1|🇨🇿:u2fkbecqcjgb|🇩🇪:u33dc0cppjs7|🇩🇯:sfng60dq5n6m|"
    "🇩🇰:u3butzxby979|🇩🇲:ddsreqpn63sh|🇩🇴:d7q686tr7797|🇩🇿:snd3hfudmhfh|🇪🇨:6r8jw6tkrxxd|🇪🇪:ud3t76cn2etg|"
    "🇪🇬:stq4yv3jkd44|🇪🇭:sf9yqg763t70|🇪🇷:sfew7gr6kj38|🇪🇸:ezjmgtwuzjwe|🇪🇹:sces1by96pw3|🇪🇺:u0wucrykkwgr|"
    "🇫🇮:ue423bvq08ck|🇫🇯:ruye5zqgznzm|🇫🇰:2hvbc3rtt2sk|🇫🇲:x3741zg9rbhv|🇫🇴:gg504enyx2uk|🇫🇷:u09tvw0f64r7|"
    "🇬🇦:s20k84m9yss1|🇬🇧:gcpvj0eh6eq9|🇬🇩:ddhkgmxpdrk1|🇬🇪:szrv76120d38|🇬🇫:dbdnrh4uxhh7|🇬🇬:gby0veyw3xz3|"
    "🇬🇭:ebzzgu07bt6h|🇬🇮:eykjw5jxkj6t|🇬🇱:gh9xytb6zygr|🇬🇲:edmh7x782f45|🇬🇳:ecc0e6e1kf4y|🇬🇵:dffhx0fyrpu2|"
    "🇬🇶:s0r33ssbe7mj|🇬🇷:swbb5ftzdvd2|🇬🇸:5nmf2e2sx54h|🇬🇹:9fz9u3qcs3eu|🇬🇺:x4quqz7w9z0j|🇬🇼:edj5nsccx11m|"
    "🇬🇾:d8y5ehb3fu4p|🇭🇰:wecpkthh2pd1|🇭🇲:rs390dkzeh03|🇭🇳:d4dwmwbsd4fq|🇭🇷:u24b9fhq99m7|🇭🇹:d7kecvwe3010|"
    "🇭🇺:u2mw1q8xkf61|🇮🇨:ethbvwk4db3x|🇮🇩:qqguwvtzpgcc|🇮🇪:gc7x9813h7tc|🇮🇱:sv9h9r1zf8mg|🇮🇲:gcsu892hjtff|"
    "🇮🇳:ttng692md2nf|🇮🇴:2m2qv1952vkh|🇮🇶:svzt98f7j53u|🇮🇷:tjy0mxq6jndq|🇮🇸:ge83tf0mkzed|🇮🇹:sr2yjyx33xus|"
    "🇯🇪:gbwrzx0n9j5e|🇯🇲:d71rh2cb4dng|🇯🇴:sv9tcfy9kwbu|🇯🇵:xn774c06kt10|🇰🇪:kzf0tuuburne|🇰🇬:txm4mm5102uu|"
    "🇰🇭:w64xmps09230|🇰🇮:80pxx3cvfz81|🇰🇲:mjcu3wjp1gd1|🇰🇳:de56em6bskhd|🇰🇵:wz4tmxdhbwmu|🇰🇷:wydveqv08x1t|"
    "🇰🇼:tj1yb2p1n0uj|🇰🇾:de7vbgu|🇰🇿:v2x94vsq7npx|🇱🇦:w78buqdzq685|🇱🇧:sy188541ujmp|🇱🇨:ddkxhkh|"
    "🇱🇮:u0qu36q1bgwt|🇱🇰:tc3ky120pk5q|🇱🇷:ec1k96jwksxn|🇱🇸:kdspd3xjfdd4|🇱🇹:u9c3zg7901e9|🇱🇺:u0u77kx7nhcp|"
    "🇱🇻:ud17xfee8jgw|🇱🇾:sksmb41m06rw|🇲🇦:evdsg7920f6v|🇲🇨:spv2bdmfdu8q|🇲🇩:u8kjtx42ddfd|🇲🇪:srtfbyuh0nxx|"
    "🇲🇫:s4fsxbyqrrg2|🇲🇬:mh9kde1h9njc|🇲🇭:xc2bx6nrzxgn|🇲🇰:srrkwyd7wjny|🇲🇱:egj5vndh9zck|🇲🇲:w5uhxt9p0gg3|"
    "🇲🇳:y23fe54cg7pv|🇲🇴:webwrc0hu9s7|🇲🇵:x4xtcsmp8uw3|🇲🇶:ddse737scj6m|🇲🇷:eg8px035uukh|🇲🇸:de5fbbsd8scd|"
    "🇲🇹:sq6hrn5z55e1|🇲🇺:mk2ujxsjzrq9|🇲🇻:t8s60xp99t0w|🇲🇼:kv8kse1s4gkh|🇲🇽:9g3w81t7j50q|🇲🇾:w28xbw2xbq5d|"
    "🇲🇿:ku9mb6pb7tmf|🇳🇦:k7vjku8q391t|🇳🇨:rsn9r5pzx34w|🇳🇪:s5jspvkuv7b6|🇳🇫:r8xrmfkbspt3|🇳🇬:s1w5tmm1vhu|"
    "🇳🇮:d473jn442k6s|🇳🇱:u173zmtys2gg|🇳🇴:u4y008wfgtve|🇳🇵:tv5cd31hr30b|🇳🇷:rxyth8z4rpj8|🇳🇺:rdydz1rcp6d8|"
    "🇳🇿:rbsr7dk08zd9|🇴🇲:t7cdjjj|🇵🇦:d1x2wd38yegj|🇵🇪:6q35wz50uwkx|🇵🇫:2svg2jt231p3|🇵🇬:rqbs5f6j0c2f|"
    "🇵🇭:wdq9709jey5e|🇵🇰:tt3kccxscyq6|🇵🇱:u3qcnhhs59zb|🇵🇲:fbr541922uru|🇵🇳:35e3rkzg7k31|🇵🇷:de0xssyxf5q9|"
    "🇵🇸:sv9jcb8p11f1|🇵🇹:eyckrcntwxuk|🇵🇼:wcrdy2pcrwck|🇵🇾:6ey6wh6t8c20|🇶🇦:ths2hxwyrm61|🇷🇪:mhprzu07euj6|"
    "🇷🇴:u81v25sq895r|🇷🇸:srywc9q8751q|🇷🇺:ucfv0n031d7w|🇷🇼:kxthzyc8bmf7|🇸🇦:th0pcu39mqrz|🇸🇧:rw390shcep0q|"
    "🇸🇨:mppmqspemem6|🇸🇩:sdz0hvv6hevj|🇸🇪:u6sce0t4hzhe|🇸🇬:w21zdqpk89ty|🇸🇭:5wmg3bkn7fg0|🏴‍☠️:1n7"
)

class FlagTable:
    """Immutable list of (flag, packed geohash) built from a flag:geohash table."""

    def __init__(self, poi=POI, bits=LUT_BITS):
        entries = []
        for p in poi.split("|"):
            flag, hash = p.split(":")
            entries.append((flag, bytes(geo.packGeo(hash, bits))))
        self.entries = tuple(entries)

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

_flagTable = None
_flagTableLock = threading.Lock()

def getFlagTable():
    global _flagTable
    if _flagTable is None:
        with _flagTableLock:
            if _flagTable is None:
                _flagTable = FlagTable()
    return _flagTable

def xorDistance(a, b):
    # similarity only: 0 means the first 32 bits are identical
    out = BitBuffer(4)
    ac = BitBuffer(data=[a[i] if i < len(a) else 0 for i in range(4)])
    bc = BitBuffer(data=[b[i] if i < len(b) else 0 for i in range(4)])
    for _ in range(32):
        out.shiftIn(ac.shiftOut() ^ bc.shiftOut())
    return int.from_bytes(bytes(out), "little")

def flagOf(geohash, bits=geo.SANE_DEFAULT, table=None):
    """Returns the flag nearest to geohash."""
    if table is None: table = getFlagTable()
    src = geo.packGeo(geohash, bits)
    flag, _ = min(table, key=lambda entry: xorDistance(src, entry[1]))
    return flag
