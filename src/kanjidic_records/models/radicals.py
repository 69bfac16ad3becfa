from __future__ import annotations

from enum import IntEnum


class KangXi(IntEnum):
    """The 214 Kangxi radicals, valued by their traditional index."""

    ONE = 1  # 一
    LINE = 2  # 丨
    DOT = 3  # 丶
    SLASH = 4  # 丿
    SECOND = 5  # 乙
    HOOK = 6  # 亅
    TWO = 7  # 二
    LID = 8  # 亠
    MAN = 9  # 人
    LEGS = 10  # 儿
    ENTER = 11  # 入
    EIGHT = 12  # 八
    DOWN_BOX = 13  # 冂
    COVER = 14  # 冖
    ICE = 15  # 冫
    TABLE = 16  # 几
    OPEN_BOX = 17  # 凵
    KNIFE = 18  # 刀
    POWER = 19  # 力
    WRAP = 20  # 勹
    SPOON = 21  # 匕
    RIGHT_OPEN_BOX = 22  # 匚
    HIDING_ENCLOSURE = 23  # 匸
    TEN = 24  # 十
    DIVINATION = 25  # 卜
    SEAL = 26  # 卩
    CLIFF = 27  # 厂
    PRIVATE = 28  # 厶
    AGAIN = 29  # 又
    MOUTH = 30  # 口
    ENCLOSURE = 31  # 囗
    EARTH = 32  # 土
    SCHOLAR = 33  # 士
    GO = 34  # 夂
    GO_SLOWLY = 35  # 夊
    EVENING = 36  # 夕
    BIG = 37  # 大
    WOMAN = 38  # 女
    CHILD = 39  # 子
    ROOF = 40  # 宀
    INCH = 41  # 寸
    SMALL = 42  # 小
    LAME = 43  # 尢
    CORPSE = 44  # 尸
    SPROUT = 45  # 屮
    MOUNTAIN = 46  # 山
    RIVER = 47  # 巛
    WORK = 48  # 工
    ONESELF = 49  # 己
    TURBAN = 50  # 巾
    DRY = 51  # 干
    SHORT_THREAD = 52  # 幺
    DOTTED_CLIFF = 53  # 广
    LONG_STRIDE = 54  # 廴
    TWO_HANDS = 55  # 廾
    SHOOT = 56  # 弋
    BOW = 57  # 弓
    SNOUT = 58  # 彐
    BRISTLE = 59  # 彡
    STEP = 60  # 彳
    HEART = 61  # 心
    HALBERD = 62  # 戈
    DOOR = 63  # 戶
    HAND = 64  # 手
    BRANCH = 65  # 支
    RAP = 66  # 攴
    SCRIPT = 67  # 文
    DIPPER = 68  # 斗
    AXE = 69  # 斤
    SQUARE = 70  # 方
    NOT = 71  # 无
    SUN = 72  # 日
    SAY = 73  # 曰
    MOON = 74  # 月
    TREE = 75  # 木
    LACK = 76  # 欠
    STOP = 77  # 止
    DEATH = 78  # 歹
    WEAPON = 79  # 殳
    DO_NOT = 80  # 毋
    COMPARE = 81  # 比
    FUR = 82  # 毛
    CLAN = 83  # 氏
    STEAM = 84  # 气
    WATER = 85  # 水
    FIRE = 86  # 火
    CLAW = 87  # 爪
    FATHER = 88  # 父
    DOUBLE_X = 89  # 爻
    HALF_TREE_TRUNK = 90  # 爿
    SLICE = 91  # 片
    FANG = 92  # 牙
    COW = 93  # 牛
    DOG = 94  # 犬
    PROFOUND = 95  # 玄
    JADE = 96  # 玉
    MELON = 97  # 瓜
    TILE = 98  # 瓦
    SWEET = 99  # 甘
    LIFE = 100  # 生
    USE = 101  # 用
    FIELD = 102  # 田
    BOLT_OF_CLOTH = 103  # 疋
    SICKNESS = 104  # 疒
    DOTTED_TENT = 105  # 癶
    WHITE = 106  # 白
    SKIN = 107  # 皮
    DISH = 108  # 皿
    EYE = 109  # 目
    SPEAR = 110  # 矛
    ARROW = 111  # 矢
    STONE = 112  # 石
    SPIRIT = 113  # 示
    TRACK = 114  # 禸
    GRAIN = 115  # 禾
    CAVE = 116  # 穴
    STAND = 117  # 立
    BAMBOO = 118  # 竹
    RICE = 119  # 米
    SILK = 120  # 糸
    JAR = 121  # 缶
    NET = 122  # 网
    SHEEP = 123  # 羊
    FEATHER = 124  # 羽
    OLD = 125  # 老
    AND = 126  # 而
    PLOW = 127  # 耒
    EAR = 128  # 耳
    BRUSH = 129  # 聿
    MEAT = 130  # 肉
    MINISTER = 131  # 臣
    SELF = 132  # 自
    ARRIVE = 133  # 至
    MORTAR = 134  # 臼
    TONGUE = 135  # 舌
    OPPOSE = 136  # 舛
    BOAT = 137  # 舟
    STOPPING = 138  # 艮
    COLOR = 139  # 色
    GRASS = 140  # 艸
    TIGER = 141  # 虍
    INSECT = 142  # 虫
    BLOOD = 143  # 血
    WALK_ENCLOSURE = 144  # 行
    CLOTHES = 145  # 衣
    WEST = 146  # 襾
    SEE = 147  # 見
    HORN = 148  # 角
    SPEECH = 149  # 言
    VALLEY = 150  # 谷
    BEAN = 151  # 豆
    PIG = 152  # 豕
    BADGER = 153  # 豸
    SHELL = 154  # 貝
    RED = 155  # 赤
    RUN = 156  # 走
    FOOT = 157  # 足
    BODY = 158  # 身
    CART = 159  # 車
    BITTER = 160  # 辛
    MORNING = 161  # 辰
    WALK = 162  # 辵
    CITY = 163  # 邑
    WINE = 164  # 酉
    DISTINGUISH = 165  # 釆
    VILLAGE = 166  # 里
    GOLD = 167  # 金
    LONG = 168  # 長
    GATE = 169  # 門
    MOUND = 170  # 阜
    SLAVE = 171  # 隶
    SHORT_TAILED_BIRD = 172  # 隹
    RAIN = 173  # 雨
    BLUE = 174  # 靑
    WRONG = 175  # 非
    FACE = 176  # 面
    LEATHER = 177  # 革
    TANNED_LEATHER = 178  # 韋
    LEEK = 179  # 韭
    SOUND = 180  # 音
    LEAF = 181  # 頁
    WIND = 182  # 風
    FLY = 183  # 飛
    EAT = 184  # 食
    HEAD = 185  # 首
    FRAGRANT = 186  # 香
    HORSE = 187  # 馬
    BONE = 188  # 骨
    TALL = 189  # 高
    HAIR = 190  # 髟
    FIGHT = 191  # 鬥
    SACRIFICIAL_WINE = 192  # 鬯
    CAULDRON = 193  # 鬲
    GHOST = 194  # 鬼
    FISH = 195  # 魚
    BIRD = 196  # 鳥
    SALT = 197  # 鹵
    DEER = 198  # 鹿
    WHEAT = 199  # 麥
    HEMP = 200  # 麻
    YELLOW = 201  # 黃
    MILLET = 202  # 黍
    BLACK = 203  # 黑
    EMBROIDERY = 204  # 黹
    FROG = 205  # 黽
    TRIPOD = 206  # 鼎
    DRUM = 207  # 鼓
    RAT = 208  # 鼠
    NOSE = 209  # 鼻
    EVEN = 210  # 齊
    TOOTH = 211  # 齒
    DRAGON = 212  # 龍
    TURTLE = 213  # 龜
    FLUTE = 214  # 龠
