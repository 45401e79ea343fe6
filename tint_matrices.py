# -*- coding: utf-8 -*-
"""
Tint: Color-space conversion engine
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Precomputed linear conversion matrices.

GENERATED by ``python -m tools.generate_matrices``. Do not edit by hand.

Each constant is a row-major 3x3 matrix for column vectors, derived with the
runtime RGB<->XYZ builder and the sharpened-cone chromatic adaptation for
every ordered pair of built-in linear bases, rounded to 10 decimal places.
"""

from typing import Final, Optional, Tuple

import numpy as np

from tint_colorspace import RgbPrimaries, WhitePoint
from tint_config import ArrayFloat

__all__ = ["const_conversion_matrix"]

BT709_D65_TO_BT2020_D65: Final[Tuple[float, ...]] = (
    0.6274523942, 0.3292484773, 0.0432991284,
    0.0691091841, 0.9195310793, 0.0113597366,
    0.0163975622, 0.0880301407, 0.8955722972,
)
BT709_D65_TO_AP1_D60: Final[Tuple[float, ...]] = (
    0.6141439932, 0.3348473539, 0.0510086529,
    0.0705873687, 0.9163972001, 0.0130154313,
    0.0203223534, 0.1081907727, 0.8714868739,
)
BT709_D65_TO_AP0_D60: Final[Tuple[float, ...]] = (
    0.4403107621, 0.3795605230, 0.1801287149,
    0.0901194773, 0.8131824149, 0.0966981078,
    0.0172443012, 0.1101933388, 0.8725623600,
)
BT709_D65_TO_CIE_RGB_E: Final[Tuple[float, ...]] = (
    0.8458657280, 0.2162111382, -0.0620768663,
    0.0964757869, 0.8152111905, 0.0883130226,
    0.0159702649, 0.1022173650, 0.8818123701,
)
BT709_D65_TO_CIE_XYZ_D65: Final[Tuple[float, ...]] = (
    0.4124564391, 0.3575760776, 0.1804374833,
    0.2126728514, 0.7151521553, 0.0721749933,
    0.0193338956, 0.1191920259, 0.9503040785,
)
BT709_D65_TO_P3_D65: Final[Tuple[float, ...]] = (
    0.8224885806, 0.1775114194, 0.0000000000,
    0.0332000485, 0.9667999515, 0.0000000000,
    0.0170890654, 0.0724115122, 0.9104994225,
)
BT709_D65_TO_P3_D60: Final[Tuple[float, ...]] = (
    0.8075781605, 0.1839260549, 0.0084957846,
    0.0331028592, 0.9660576203, 0.0008395205,
    0.0165044138, 0.0702626437, 0.9132329425,
)
BT709_D65_TO_P3_P3_DCI: Final[Tuple[float, ...]] = (
    0.8508162320, 0.1421117933, 0.0070719748,
    0.0335336418, 0.9644901043, 0.0019762539,
    0.0165215773, 0.0675453243, 0.9159330984,
)
BT709_D65_TO_ADOBE_1998_D65: Final[Tuple[float, ...]] = (
    0.7151627358, 0.2848372642, 0.0000000000,
    0.0000000000, 1.0000000000, 0.0000000000,
    0.0000000000, 0.0411705085, 0.9588294915,
)
BT709_D65_TO_ADOBE_WIDE_D50: Final[Tuple[float, ...]] = (
    0.5975019849, 0.3893468845, 0.0131511306,
    0.0970257346, 0.8418084764, 0.0611657890,
    0.0101720061, 0.0633800017, 0.9264479922,
)
BT709_D65_TO_PRO_PHOTO_D50: Final[Tuple[float, ...]] = (
    0.5329726559, 0.3154915630, 0.1515357810,
    0.1000971780, 0.8723090508, 0.0275937712,
    0.0156220088, 0.1122257716, 0.8721522196,
)
BT709_D65_TO_APPLE_D65: Final[Tuple[float, ...]] = (
    0.9339964668, 0.0767951838, -0.0107916507,
    -0.0234399117, 1.0401905018, -0.0167505901,
    -0.0009532408, -0.0320865563, 1.0330397971,
)
BT2020_D65_TO_BT709_D65: Final[Tuple[float, ...]] = (
    1.6603626562, -0.5875399969, -0.0728226593,
    -0.1245635485, 1.1329113746, -0.0083478261,
    -0.0181566058, -0.1006017318, 1.1187583376,
)
BT2020_D65_TO_AP1_D60: Final[Tuple[float, ...]] = (
    0.9770658332, 0.0133866573, 0.0095475095,
    0.0028146278, 0.9954145343, 0.0017708379,
    0.0044426065, 0.0229572728, 0.9726001207,
)
BT2020_D65_TO_AP0_D60: Final[Tuple[float, ...]] = (
    0.6805256148, 0.1531869893, 0.1662873958,
    0.0465824181, 0.8585868129, 0.0948307690,
    -0.0009370503, 0.0269262857, 0.9740107647,
)
BT2020_D65_TO_CIE_RGB_E: Final[Tuple[float, ...]] = (
    1.3786389456, -0.2457868492, -0.1328520964,
    0.0570357304, 0.8579942038, 0.0849700658,
    -0.0022268458, 0.0177081945, 0.9845186513,
)
BT2020_D65_TO_CIE_XYZ_D65: Final[Tuple[float, ...]] = (
    0.6370101914, 0.1446150274, 0.1688447812,
    0.2627217174, 0.6779892755, 0.0592890071,
    0.0000000000, 0.0280723288, 1.0607576712,
)
BT2020_D65_TO_P3_D65: Final[Tuple[float, ...]] = (
    1.3435178720, -0.2821402319, -0.0613776401,
    -0.0653039119, 1.0757923055, -0.0104883936,
    0.0028226320, -0.0196025024, 1.0167798704,
)
BT2020_D65_TO_P3_D60: Final[Tuple[float, ...]] = (
    1.3178078829, -0.2669672408, -0.0508406421,
    -0.0653880569, 1.0749239556, -0.0095358986,
    0.0020699375, -0.0219684705, 1.0198985330,
)
BT2020_D65_TO_P3_P3_DCI: Final[Tuple[float, ...]] = (
    1.3948331465, -0.3395999521, -0.0552331944,
    -0.0644981853, 1.0727806394, -0.0082824541,
    0.0023878885, -0.0253286772, 1.0229407887,
)
BT2020_D65_TO_ADOBE_1998_D65: Final[Tuple[float, ...]] = (
    1.1519491592, -0.0974913350, -0.0544578242,
    -0.1245635485, 1.1329113746, -0.0083478261,
    -0.0225374337, -0.0498173700, 1.0723548037,
)
BT2020_D65_TO_ADOBE_WIDE_D50: Final[Tuple[float, ...]] = (
    0.9433327733, 0.0887161732, -0.0320489466,
    0.0551286923, 0.8905345140, 0.0543367937,
    -0.0078267698, -0.0273748081, 1.0352015779,
)
BT2020_D65_TO_PRO_PHOTO_D50: Final[Tuple[float, ...]] = (
    0.8428777706, 0.0290364657, 0.1280857636,
    0.0570386963, 0.9266617689, 0.0162995347,
    -0.0038763644, 0.0302232745, 0.9736530899,
)
BT2020_D65_TO_APPLE_D65: Final[Tuple[float, ...]] = (
    1.5414029137, -0.4606724852, -0.0807304285,
    -0.1681844401, 1.1939006752, -0.0257162351,
    -0.0163424065, -0.1397167501, 1.1560591567,
)
AP1_D60_TO_BT709_D65: Final[Tuple[float, ...]] = (
    1.7015070583, -0.6110425859, -0.0904644724,
    -0.1307290280, 1.1401045458, -0.0093755178,
    -0.0234483775, -0.1272893164, 1.1507376939,
)
AP1_D60_TO_BT2020_D65: Final[Tuple[float, ...]] = (
    1.0235570498, -0.0135339642, -0.0100230856,
    -0.0028860071, 1.0046869359, -0.0018009288,
    -0.0046072443, -0.0236528307, 1.0282600749,
)
AP1_D60_TO_AP0_D60: Final[Tuple[float, ...]] = (
    0.6953485652, 0.1407615900, 0.1638898448,
    0.0447649663, 0.8597374933, 0.0954975404,
    -0.0055243394, 0.0040270578, 1.0014972817,
)
AP1_D60_TO_CIE_RGB_E: Final[Tuple[float, ...]] = (
    1.4124370365, -0.2624549584, -0.1499820781,
    0.0555116687, 0.8592338655, 0.0852544658,
    -0.0068663276, -0.0054653232, 1.0123316508,
)
AP1_D60_TO_CIE_XYZ_D65: Final[Tuple[float, ...]] = (
    0.6508210031, 0.1326778986, 0.1669710984,
    0.2666808251, 0.6762089486, 0.0571102263,
    -0.0049681867, 0.0031139805, 1.0906842062,
)
AP1_D60_TO_P3_D65: Final[Tuple[float, ...]] = (
    1.3762642299, -0.3001939729, -0.0760702569,
    -0.0698987010, 1.0819663761, -0.0120676751,
    -0.0017388554, -0.0437823015, 1.0455211570,
)
AP1_D60_TO_P3_D60: Final[Tuple[float, ...]] = (
    1.3498562534, -0.2848511388, -0.0650051146,
    -0.0699867106, 1.0810725658, -0.0110858552,
    -0.0025168214, -0.0462229371, 1.0487397585,
)
AP1_D60_TO_P3_P3_DCI: Final[Tuple[float, ...]] = (
    1.4289258610, -0.3587628358, -0.0701630252,
    -0.0690754655, 1.0788775131, -0.0098020475,
    -0.0021956993, -0.0496751539, 1.0518708532,
)
AP1_D60_TO_ADOBE_1998_D65: Final[Tuple[float, ...]] = (
    1.1796179440, -0.1122506276, -0.0673673164,
    -0.1307290280, 1.1401045458, -0.0093755178,
    -0.0278651764, -0.0751100665, 1.1029752430,
)
AP1_D60_TO_ADOBE_WIDE_D50: Final[Tuple[float, ...]] = (
    0.9654465322, 0.0771229966, -0.0425695288,
    0.0536069299, 0.8926770634, 0.0537160067,
    -0.0127015681, -0.0518826324, 1.0645842005,
)
AP1_D60_TO_PRO_PHOTO_D50: Final[Tuple[float, ...]] = (
    0.8620595624, 0.0147354893, 0.1232049483,
    0.0556329114, 0.9298474834, 0.0145196052,
    -0.0085407624, 0.0073877400, 1.0011530224,
)
AP1_D60_TO_APPLE_D65: Final[Tuple[float, ...]] = (
    1.5794152677, -0.4817834163, -0.0976318514,
    -0.1754734942, 1.2023808750, -0.0269073808,
    -0.0216504088, -0.1674944875, 1.1891448963,
)
AP0_D60_TO_BT709_D65: Final[Tuple[float, ...]] = (
    2.5160003104, -1.1208157916, -0.3951845188,
    -0.2770794071, 1.3719171374, -0.0948377302,
    -0.0147317405, -0.1511048961, 1.1658366366,
)
AP0_D60_TO_BT2020_D65: Final[Tuple[float, ...]] = (
    1.4868045742, -0.2580996337, -0.2287049405,
    -0.0810717464, 1.1823452693, -0.1012735230,
    0.0036715936, -0.0329339469, 1.0292623533,
)
AP0_D60_TO_AP1_D60: Final[Tuple[float, ...]] = (
    1.4516557250, -0.2366671199, -0.2149886051,
    -0.0765086914, 1.1761388906, -0.0996301992,
    0.0083150939, -0.0060347730, 0.9977196791,
)
AP0_D60_TO_CIE_RGB_E: Final[Tuple[float, ...]] = (
    2.0692052806, -0.6420557813, -0.4271494993,
    0.0155538719, 0.9969260873, -0.0124799591,
    -0.0011317664, -0.0109121369, 1.0120439033,
)
AP0_D60_TO_CIE_XYZ_D65: Final[Tuple[float, ...]] = (
    0.9360054030, 0.0010120714, 0.0134525256,
    0.3358677617, 0.7318564125, -0.0677241742,
    0.0016187984, -0.0017437516, 1.0889549532,
)
AP0_D60_TO_P3_D65: Final[Tuple[float, ...]] = (
    2.0201967651, -0.6783272311, -0.3418695340,
    -0.1843490250, 1.2891582832, -0.1048092582,
    0.0095191137, -0.0573920205, 1.0478729068,
)
AP0_D60_TO_P3_D60: Final[Tuple[float, ...]] = (
    1.9807796224, -0.6540988031, -0.3266808194,
    -0.1844002364, 1.2881219421, -0.1037217057,
    0.0086032678, -0.0600978514, 1.0514945836,
)
AP0_D60_TO_P3_P3_DCI: Final[Tuple[float, ...]] = (
    2.1011734697, -0.7597112739, -0.3414621958,
    -0.1828988067, 1.2853168459, -0.1024180392,
    0.0093595865, -0.0642530324, 1.0548934459,
)
AP0_D60_TO_ADOBE_1998_D65: Final[Tuple[float, ...]] = (
    1.7204271249, -0.4107925636, -0.3096345612,
    -0.2770794071, 1.3719171374, -0.0948377302,
    -0.0255327273, -0.0884013045, 1.1139340318,
)
AP0_D60_TO_ADOBE_WIDE_D50: Final[Tuple[float, ...]] = (
    1.3952414365, -0.1375251972, -0.2577162394,
    0.0099679063, 1.0369010494, -0.0468689557,
    -0.0056167141, -0.0644396622, 1.0700563763,
)
AP0_D60_TO_PRO_PHOTO_D50: Final[Tuple[float, ...]] = (
    1.2513107667, -0.1874336857, -0.0638770811,
    0.0097391520, 1.0803756841, -0.0901148361,
    -0.0046387915, 0.0046685947, 0.9999701968,
)
AP0_D60_TO_APPLE_D65: Final[Tuple[float, ...]] = (
    2.3288160163, -0.9398506893, -0.3889653270,
    -0.3469434272, 1.4558580949, -0.1089146677,
    -0.0087263044, -0.1990490603, 1.2077753647,
)
CIE_RGB_E_TO_BT709_D65: Final[Tuple[float, ...]] = (
    1.2185334191, -0.3381832754, 0.1196498563,
    -0.1436195535, 1.2821350440, -0.1385154905,
    -0.0054205286, -0.1424969683, 1.1479174969,
)
CIE_RGB_E_TO_BT2020_D65: Final[Tuple[float, ...]] = (
    0.7170504878, 0.2037771106, 0.0791724016,
    -0.0479123684, 1.1539727225, -0.1060603541,
    0.0024836527, -0.0202951902, 1.0178115375,
)
CIE_RGB_E_TO_AP1_D60: Final[Tuple[float, ...]] = (
    0.6999878586, 0.2143577212, 0.0856544203,
    -0.0456700396, 1.1492188374, -0.1035487979,
    0.0045012368, 0.0076582637, 0.9878404996,
)
CIE_RGB_E_TO_AP0_D60: Final[Tuple[float, ...]] = (
    0.4810446727, 0.3120743163, 0.2068810109,
    -0.0074994554, 0.9983535841, 0.0091458713,
    0.0004570900, 0.0111135161, 0.9884293940,
)
CIE_RGB_E_TO_CIE_XYZ_D65: Final[Tuple[float, ...]] = (
    0.4502589718, 0.2932631562, 0.2069478720,
    0.1560479169, 0.8347145209, 0.0092375622,
    0.0012895419, 0.0108664231, 1.0766740350,
)
CIE_RGB_E_TO_P3_D65: Final[Tuple[float, ...]] = (
    0.9767357115, -0.0505582706, 0.0738225591,
    -0.0983960087, 1.2283403972, -0.1299443884,
    0.0054885000, -0.0426813061, 1.0371928060,
)
CIE_RGB_E_TO_P3_D60: Final[Tuple[float, ...]] = (
    0.9575995475, -0.0385020105, 0.0809024629,
    -0.0984123746, 1.2273018671, -0.1288894925,
    0.0050698849, -0.0456282445, 1.0405583596,
)
CIE_RGB_E_TO_P3_P3_DCI: Final[Tuple[float, ...]] = (
    1.0162996460, -0.1065330447, 0.0902333987,
    -0.0976684872, 1.2249844353, -0.1273159480,
    0.0054664232, -0.0495027834, 1.0440363602,
)
CIE_RGB_E_TO_ADOBE_1998_D65: Final[Tuple[float, ...]] = (
    0.8305414929, 0.1233437619, 0.0461147452,
    -0.1436195535, 1.2821350440, -0.1385154905,
    -0.0111102527, -0.0838441438, 1.0949543966,
)
CIE_RGB_E_TO_ADOBE_WIDE_D50: Final[Tuple[float, ...]] = (
    0.6720870248, 0.2952561103, 0.0326568648,
    -0.0030026083, 1.0377837277, -0.0347811194,
    -0.0017295160, -0.0541943112, 1.0559238272,
)
CIE_RGB_E_TO_PRO_PHOTO_D50: Final[Tuple[float, ...]] = (
    0.6033128313, 0.2026669612, 0.1940202075,
    -0.0034584527, 1.0806347829, -0.0771763303,
    -0.0018094015, 0.0143264454, 0.9874829561,
)
CIE_RGB_E_TO_APPLE_D65: Final[Tuple[float, ...]] = (
    1.1271351146, -0.2158624105, 0.0887272959,
    -0.1778632141, 1.3439785892, -0.1661153751,
    -0.0021529207, -0.1880219674, 1.1901748880,
)
CIE_XYZ_D65_TO_BT709_D65: Final[Tuple[float, ...]] = (
    3.2404541621, -1.5371385128, -0.4985314096,
    -0.9692660305, 1.8760108454, 0.0415560175,
    0.0556434310, -0.2040259135, 1.0572251882,
)
CIE_XYZ_D65_TO_BT2020_D65: Final[Tuple[float, ...]] = (
    1.7165106698, -0.3556416700, -0.2533455418,
    -0.6666930012, 1.6165022083, 0.0157687504,
    0.0176436388, -0.0427797817, 0.9423050727,
)
CIE_XYZ_D65_TO_AP1_D60: Final[Tuple[float, ...]] = (
    1.6683875899, -0.3262542040, -0.2383275154,
    -0.6587733207, 1.6080130380, 0.0166520395,
    0.0094805336, -0.0060771147, 0.9157225204,
)
CIE_XYZ_D65_TO_AP0_D60: Final[Tuple[float, ...]] = (
    1.0689347000, -0.0015098981, -0.0132991066,
    -0.4907814416, 1.3672839906, 0.0910969079,
    -0.0023749290, 0.0021916865, 0.9184772758,
)
CIE_XYZ_D65_TO_CIE_RGB_E: Final[Tuple[float, ...]] = (
    2.5279688375, -0.8819330577, -0.4783349865,
    -0.4726171099, 1.3630302420, 0.0791474725,
    0.0017421575, -0.0127001982, 0.9285603169,
)
CIE_XYZ_D65_TO_P3_D65: Final[Tuple[float, ...]] = (
    2.4931807553, -0.9312655255, -0.4026597238,
    -0.8295031158, 1.7626941211, 0.0236250887,
    0.0358536258, -0.0761889548, 0.9570926215,
)
CIE_XYZ_D65_TO_P3_D60: Final[Tuple[float, ...]] = (
    2.4391194688, -0.8980455790, -0.3859778868,
    -0.8290518233, 1.7612796094, 0.0245302546,
    0.0361940167, -0.0798792737, 0.9601847365,
)
CIE_XYZ_D65_TO_P3_P3_DCI: Final[Tuple[float, ...]] = (
    2.6196803752, -1.0426619981, -0.4107763454,
    -0.8260733000, 1.7574448366, 0.0254521393,
    0.0390336857, -0.0855542789, 0.9629179318,
)
CIE_XYZ_D65_TO_ADOBE_1998_D65: Final[Tuple[float, ...]] = (
    2.0413689793, -0.5649463872, -0.3446943844,
    -0.9692660305, 1.8760108454, 0.0415560175,
    0.0134473872, -0.1183897424, 1.0154095720,
)
CIE_XYZ_D65_TO_ADOBE_WIDE_D50: Final[Tuple[float, ...]] = (
    1.5595288587, -0.1907075060, -0.2677900943,
    -0.4981254404, 1.4176204321, 0.0512778444,
    0.0230805818, -0.0857536097, 0.9770269088,
)
CIE_XYZ_D65_TO_PRO_PHOTO_D50: Final[Tuple[float, ...]] = (
    1.4297101770, -0.2583044280, -0.0923855919,
    -0.5196038018, 1.4769681681, 0.0155209330,
    -0.0096246831, 0.0085819201, 0.9189368886,
)
CIE_XYZ_D65_TO_APPLE_D65: Final[Tuple[float, ...]] = (
    2.9515372909, -1.2894115659, -0.4738444780,
    -1.0851093382, 1.9908566081, 0.0372025611,
    0.0854933545, -0.2694963527, 1.0912975249,
)
P3_D65_TO_BT709_D65: Final[Tuple[float, ...]] = (
    1.2249005430, -0.2249005430, 0.0000000000,
    -0.0420632597, 1.0420632597, 0.0000000000,
    -0.0196447584, -0.0786535769, 1.0982983353,
)
P3_D65_TO_BT2020_D65: Final[Tuple[float, ...]] = (
    0.7538669132, 0.1985777261, 0.0475553607,
    0.0457502432, 0.9417733770, 0.0124763798,
    -0.0012107533, 0.0176051902, 0.9836055631,
)
P3_D65_TO_AP1_D60: Final[Tuple[float, ...]] = (
    0.7371784869, 0.2067987945, 0.0560227186,
    0.0476601677, 0.9380450058, 0.0142948265,
    0.0032218560, 0.0396255611, 0.9571525828,
)
P3_D65_TO_AP0_D60: Final[Tuple[float, ...]] = (
    0.5198327536, 0.2823321786, 0.1978350677,
    0.0742826826, 0.8195139466, 0.1062033708,
    -0.0006538139, 0.0423200264, 0.9583337875,
)
P3_D65_TO_CIE_RGB_E: Final[Tuple[float, ...]] = (
    1.0282263293, 0.0399525895, -0.0681789189,
    0.0821479157, 0.8208580386, 0.0969940457,
    -0.0020606004, 0.0335675423, 0.9684930581,
)
P3_D65_TO_CIE_XYZ_D65: Final[Tuple[float, ...]] = (
    0.4866326500, 0.2656631625, 0.1981741875,
    0.2290036000, 0.6917267250, 0.0792696750,
    0.0000000000, 0.0451126125, 1.0437173875,
)
P3_D65_TO_P3_D60: Final[Tuple[float, ...]] = (
    0.9812995002, 0.0093695937, 0.0093309061,
    -0.0001043146, 0.9991822706, 0.0009220440,
    -0.0006794510, -0.0023227695, 1.0030022205,
)
P3_D65_TO_P3_P3_DCI: Final[Tuple[float, ...]] = (
    1.0360486520, -0.0438157901, 0.0077671381,
    0.0004669553, 0.9973625283, 0.0021705164,
    -0.0005971720, -0.0053706252, 1.0059677972,
)
P3_D65_TO_ADOBE_1998_D65: Final[Tuple[float, ...]] = (
    0.8640220395, 0.1359779605, 0.0000000000,
    -0.0420632597, 1.0420632597, 0.0000000000,
    -0.0205677395, -0.0325130948, 1.0530808343,
)
P3_D65_TO_ADOBE_WIDE_D50: Final[Tuple[float, ...]] = (
    0.7152449559, 0.2703111793, 0.0144438648,
    0.0822360793, 0.8505856365, 0.0671782842,
    -0.0084061207, -0.0091101669, 1.0175162876,
)
P3_D65_TO_PRO_PHOTO_D50: Final[Tuple[float, ...]] = (
    0.6365910083, 0.1969774957, 0.1664314960,
    0.0853748525, 0.8843189544, 0.0303061930,
    -0.0027183944, 0.0448350635, 0.9578833309,
)
P3_D65_TO_APPLE_D65: Final[Tuple[float, ...]] = (
    1.1410345230, -0.1291820710, -0.0118524520,
    -0.0721363025, 1.0905334477, -0.0183971453,
    -0.0201117773, -0.1144741122, 1.1345858895,
)
P3_D60_TO_BT709_D65: Final[Tuple[float, ...]] = (
    1.2482102533, -0.2368158837, -0.0113943696,
    -0.0427543355, 1.0433156964, -0.0005613609,
    -0.0192688470, -0.0759911393, 1.0952599863,
)
P3_D60_TO_BT2020_D65: Final[Tuple[float, ...]] = (
    0.7682813878, 0.1916290611, 0.0400895511,
    0.0467299629, 0.9421318165, 0.0111382206,
    -0.0005527105, 0.0199044652, 0.9806482453,
)
P3_D60_TO_AP1_D60: Final[Tuple[float, ...]] = (
    0.7512817753, 0.2000362421, 0.0486819826,
    0.0486771316, 0.9383863155, 0.0129365529,
    0.0039483981, 0.0418391948, 0.9542124071,
)
P3_D60_TO_AP0_D60: Final[Tuple[float, ...]] = (
    0.5299016773, 0.2780406829, 0.1920576398,
    0.0758577207, 0.8197160545, 0.1044262248,
    0.0000000000, 0.0445757077, 0.9554242923,
)
P3_D60_TO_CIE_RGB_E: Final[Tuple[float, ...]] = (
    1.0477704607, 0.0299793262, -0.0777497869,
    0.0838665635, 0.8209646250, 0.0951688115,
    -0.0014274947, 0.0358530423, 0.9655744524,
)
P3_D60_TO_CIE_XYZ_D65: Final[Tuple[float, ...]] = (
    0.4960676065, 0.2616768484, 0.1927255451,
    0.2334938496, 0.6902804997, 0.0762256506,
    0.0007255270, 0.0475616483, 1.0405428247,
)
P3_D60_TO_P3_D65: Final[Tuple[float, ...]] = (
    1.0190492967, -0.0095779099, -0.0094713868,
    0.0001057515, 1.0008152659, -0.0009210173,
    0.0006905665, 0.0023112167, 0.9969982169,
)
P3_D60_TO_P3_P3_DCI: Final[Tuple[float, ...]] = (
    1.0557853803, -0.0537567407, -0.0020286396,
    0.0005828219, 0.9981761880, 0.0012409900,
    0.0000855720, -0.0030442745, 1.0029587025,
)
P3_D60_TO_ADOBE_1998_D65: Final[Tuple[float, ...]] = (
    0.8804954316, 0.1278132934, -0.0083087250,
    -0.0427543355, 1.0433156964, -0.0005613609,
    -0.0202357565, -0.0299087077, 1.0501444642,
)
P3_D60_TO_ADOBE_WIDE_D50: Final[Tuple[float, ...]] = (
    0.7289084295, 0.2637143860, 0.0073771845,
    0.0839389605, 0.8506467037, 0.0654143358,
    -0.0078645521, -0.0066853804, 1.0145499326,
)
P3_D60_TO_PRO_PHOTO_D50: Final[Tuple[float, ...]] = (
    0.6488533820, 0.1914255327, 0.1597210854,
    0.0871156299, 0.8842922410, 0.0285921290,
    -0.0021039545, 0.0471115285, 0.9549924260,
)
P3_D60_TO_APPLE_D65: Final[Tuple[float, ...]] = (
    1.1627485821, -0.1402435082, -0.0225050739,
    -0.0734078272, 1.0920709176, -0.0186630904,
    -0.0197234914, -0.1117525364, 1.1314760278,
)
P3_P3_DCI_TO_BT709_D65: Final[Tuple[float, ...]] = (
    1.1823541066, -0.1735996447, -0.0087544619,
    -0.0410709000, 1.0430042167, -0.0019333167,
    -0.0182985062, -0.0737847756, 1.0920832819,
)
P3_P3_DCI_TO_BT2020_D65: Final[Tuple[float, ...]] = (
    0.7275560744, 0.2312872211, 0.0411567046,
    0.0437376924, 0.9462392877, 0.0100230199,
    -0.0006153874, 0.0228895960, 0.9777257914,
)
P3_P3_DCI_TO_AP1_D60: Final[Tuple[float, ...]] = (
    0.7114498081, 0.2388683610, 0.0496818309,
    0.0455838445, 0.9425918611, 0.0118242944,
    0.0036378176, 0.0450130154, 0.9513491670,
)
P3_P3_DCI_TO_AP0_D60: Final[Tuple[float, ...]] = (
    0.5017182591, 0.3061546773, 0.1921270636,
    0.0713855695, 0.8253731303, 0.1032413002,
    -0.0001034570, 0.0475566945, 0.9525467625,
)
P3_P3_DCI_TO_CIE_RGB_E: Final[Tuple[float, ...]] = (
    0.9923687451, 0.0832474667, -0.0756162118,
    0.0789710891, 0.8270043903, 0.0940245205,
    -0.0014515000, 0.0387763826, 0.9626751175,
)
P3_P3_DCI_TO_CIE_XYZ_D65: Final[Tuple[float, ...]] = (
    0.4696818568, 0.2880375263, 0.1927506169,
    0.2207619820, 0.7036613664, 0.0755766516,
    0.0005750420, 0.0508434550, 1.0374115031,
)
P3_P3_DCI_TO_P3_D65: Final[Tuple[float, ...]] = (
    0.9651821971, 0.0423614336, -0.0075436308,
    -0.0004531304, 1.0026129095, -0.0021597791,
    0.0005705413, 0.0053778613, 0.9940515974,
)
P3_P3_DCI_TO_P3_D60: Final[Tuple[float, ...]] = (
    0.9471338857, 0.0510135096, 0.0018526048,
    -0.0005529164, 1.0017935832, -0.0012406668,
    -0.0000824873, 0.0030363856, 0.9970461017,
)
P3_P3_DCI_TO_ADOBE_1998_D65: Final[Tuple[float, ...]] = (
    0.8338770747, 0.1729344709, -0.0068115456,
    -0.0410709000, 1.0430042167, -0.0019333167,
    -0.0192360573, -0.0278060049, 1.0470420621,
)
P3_P3_DCI_TO_ADOBE_WIDE_D50: Final[Tuple[float, ...]] = (
    0.6902274526, 0.3013939568, 0.0083785906,
    0.0790257014, 0.8566530535, 0.0643212451,
    -0.0075287749, -0.0040180048, 1.0115467797,
)
P3_P3_DCI_TO_PRO_PHOTO_D50: Final[Tuple[float, ...]] = (
    0.6144320076, 0.2253541333, 0.1602138591,
    0.0820188669, 0.8904091835, 0.0275719496,
    -0.0020975501, 0.0499884220, 0.9521091280,
)
P3_P3_DCI_TO_APPLE_D65: Final[Tuple[float, ...]] = (
    1.1013579819, -0.0812474947, -0.0201104872,
    -0.0701293251, 1.0902281785, -0.0200988533,
    -0.0187123296, -0.1095235409, 1.1282358705,
)
ADOBE_1998_D65_TO_BT709_D65: Final[Tuple[float, ...]] = (
    1.3982831459, -0.3982831459, 0.0000000000,
    0.0000000000, 1.0000000000, 0.0000000000,
    0.0000000000, -0.0429383002, 1.0429383002,
)
ADOBE_1998_D65_TO_BT2020_D65: Final[Tuple[float, ...]] = (
    0.8773561077, 0.0774855729, 0.0451583194,
    0.0966342073, 0.8915182882, 0.0118475044,
    0.0229284348, 0.0430449159, 0.9340266493,
)
ADOBE_1998_D65_TO_AP1_D60: Final[Tuple[float, ...]] = (
    0.8587471949, 0.0880539274, 0.0531988778,
    0.0987011279, 0.8877245803, 0.0135742918,
    0.0284164042, 0.0626765568, 0.9089070389,
)
ADOBE_1998_D65_TO_AP0_D60: Final[Tuple[float, ...]] = (
    0.6156791176, 0.1964577466, 0.1878631357,
    0.1260125462, 0.7731372936, 0.1008501602,
    0.0241124157, 0.0658588797, 0.9100287046,
)
ADOBE_1998_D65_TO_CIE_RGB_E: Final[Tuple[float, ...]] = (
    1.1827597912, -0.1180174498, -0.0647423414,
    0.1349004668, 0.7729944995, 0.0921050337,
    0.0223309523, 0.0579931534, 0.9196758943,
)
ADOBE_1998_D65_TO_CIE_XYZ_D65: Final[Tuple[float, ...]] = (
    0.5767308872, 0.1855539507, 0.1881851621,
    0.2973768637, 0.6273490715, 0.0752740648,
    0.0270342603, 0.0706872193, 0.9911085203,
)
ADOBE_1998_D65_TO_P3_D65: Final[Tuple[float, ...]] = (
    1.1500719199, -0.1500719199, 0.0000000000,
    0.0464230683, 0.9535769317, 0.0000000000,
    0.0238953521, 0.0265099279, 0.9495947200,
)
ADOBE_1998_D65_TO_P3_D60: Final[Tuple[float, ...]] = (
    1.1292229308, -0.1380835099, 0.0088605792,
    0.0462871701, 0.9528372619, 0.0008755681,
    0.0230778436, 0.0244765437, 0.9524456127,
)
ADOBE_1998_D65_TO_P3_P3_DCI: Final[Tuple[float, ...]] = (
    1.1896819974, -0.1970576307, 0.0073756333,
    0.0468895262, 0.9510493629, 0.0020611109,
    0.0231018431, 0.0216364482, 0.9552617087,
)
ADOBE_1998_D65_TO_ADOBE_WIDE_D50: Final[Tuple[float, ...]] = (
    0.8354769552, 0.1508072271, 0.0137158178,
    0.1356694494, 0.8005384066, 0.0637921440,
    0.0142233447, 0.0195485611, 0.9662280942,
)
ADOBE_1998_D65_TO_PRO_PHOTO_D50: Final[Tuple[float, ...]] = (
    0.7452466820, 0.0967108481, 0.1580424699,
    0.1399641969, 0.8312572022, 0.0287786009,
    0.0218439915, 0.0685550550, 0.9096009534,
)
ADOBE_1998_D65_TO_APPLE_D65: Final[Tuple[float, ...]] = (
    1.3059915179, -0.2947364921, -0.0112550258,
    -0.0327756334, 1.0502454654, -0.0174698320,
    -0.0013329006, -0.0760638695, 1.0773967701,
)
ADOBE_WIDE_D50_TO_BT709_D65: Final[Tuple[float, ...]] = (
    1.8093866923, -0.8391010386, 0.0297143463,
    -0.2081386547, 1.2903771373, -0.0822384826,
    -0.0056271526, -0.0790640866, 1.0846912392,
)
ADOBE_WIDE_D50_TO_BT2020_D65: Final[Tuple[float, ...]] = (
    1.0665310262, -0.1050646540, 0.0385336278,
    -0.0664086468, 1.1276541464, -0.0612454996,
    0.0063075337, 0.0290252639, 0.9646672024,
)
ADOBE_WIDE_D50_TO_AP1_D60: Final[Tuple[float, ...]] = (
    1.0412422573, -0.0872824452, 0.0460401879,
    -0.0630910747, 1.1222390082, -0.0591479334,
    0.0093483243, 0.0536510781, 0.9370005976,
)
ADOBE_WIDE_D50_TO_AP0_D60: Final[Tuple[float, ...]] = (
    0.7166776051, 0.1060692910, 0.1772531040,
    -0.0067378459, 0.9660473021, 0.0406905438,
    0.0033560743, 0.0587329080, 0.9379110177,
)
ADOBE_WIDE_D50_TO_CIE_RGB_E: Final[Tuple[float, ...]] = (
    1.4858456124, -0.4258648506, -0.0599807618,
    0.0043880936, 0.9639945609, 0.0316173456,
    0.0026589072, 0.0487785954, 0.9485624974,
)
ADOBE_WIDE_D50_TO_CIE_XYZ_D65: Final[Tuple[float, ...]] = (
    0.6708524391, 0.1010492442, 0.1785683167,
    0.2355504799, 0.7386555305, 0.0257939896,
    0.0048265194, 0.0624446493, 1.0215588313,
)
ADOBE_WIDE_D50_TO_P3_D65: Final[Tuple[float, ...]] = (
    1.4512529043, -0.4610943450, 0.0098414407,
    -0.1411567153, 1.2196783585, -0.0785216433,
    0.0107255735, 0.0071109021, 0.9821635243,
)
ADOBE_WIDE_D50_TO_P3_D60: Final[Tuple[float, ...]] = (
    1.4228912479, -0.4409774084, 0.0180861606,
    -0.1411827847, 1.2187356472, -0.0775528625,
    0.0100995934, 0.0046125099, 0.9852878967,
)
ADOBE_WIDE_D50_TO_P3_P3_DCI: Final[Tuple[float, ...]] = (
    1.5098368152, -0.5311021141, 0.0212652990,
    -0.1400834682, 1.2162616153, -0.0761781471,
    0.0106810339, 0.0008782558, 0.9884407104,
)
ADOBE_WIDE_D50_TO_ADOBE_1998_D65: Final[Tuple[float, ...]] = (
    1.2347202920, -0.2325463007, -0.0021739912,
    -0.2081386547, 1.2903771373, -0.0822384826,
    -0.0139646541, -0.0226834950, 1.0366481491,
)
ADOBE_WIDE_D50_TO_PRO_PHOTO_D50: Final[Tuple[float, ...]] = (
    0.8978349266, -0.0520958473, 0.1542609207,
    -0.0006020049, 1.0394343334, -0.0388323286,
    0.0000000000, 0.0627492076, 0.9372507924,
)
ADOBE_WIDE_D50_TO_APPLE_D65: Final[Tuple[float, ...]] = (
    1.6740374578, -0.6837694239, 0.0097319661,
    -0.2588214578, 1.3632308663, -0.1044094085,
    -0.0008594012, -0.1222802413, 1.1231396424,
)
PRO_PHOTO_D50_TO_BT709_D65: Final[Tuple[float, ...]] = (
    2.0148174064, -0.6864632345, -0.3283541719,
    -0.2309982832, 1.2297708723, 0.0012274109,
    -0.0063653276, -0.1459470578, 1.1523123854,
)
PRO_PHOTO_D50_TO_BT2020_D65: Final[Tuple[float, ...]] = (
    1.1878705594, -0.0321421932, -0.1557283662,
    -0.0732400221, 1.0817137033, -0.0084736812,
    0.0070026712, -0.0337055625, 1.0267028912,
)
PRO_PHOTO_D50_TO_AP1_D60: Final[Tuple[float, ...]] = (
    1.1597141569, -0.0172463124, -0.1424678445,
    -0.0695483684, 1.0766033869, -0.0070550184,
    0.0104066492, -0.0080916327, 0.9976849835,
)
PRO_PHOTO_D50_TO_AP0_D60: Final[Tuple[float, ...]] = (
    0.7983213803, 0.1382260695, 0.0634525502,
    -0.0068849654, 0.9240515355, 0.0828334299,
    0.0037355009, -0.0036729297, 0.9999374287,
)
PRO_PHOTO_D50_TO_CIE_RGB_E: Final[Tuple[float, ...]] = (
    1.6547157302, -0.3057056276, -0.3490101026,
    0.0055065679, 0.9234068703, 0.0710865617,
    0.0029521073, -0.0139569825, 1.0110048752,
)
PRO_PHOTO_D50_TO_CIE_XYZ_D65: Final[Tuple[float, ...]] = (
    0.7472764091, 0.1302661439, 0.0729274470,
    0.2628386253, 0.7229474685, 0.0142139062,
    0.0053721192, -0.0053872112, 1.0888450919,
)
PRO_PHOTO_D50_TO_P3_D65: Final[Tuple[float, ...]] = (
    1.6161594756, -0.3463097982, -0.2698496773,
    -0.1564370933, 1.1661518070, -0.0097147136,
    0.0119087843, -0.0555661585, 1.0436573742,
)
PRO_PHOTO_D50_TO_P3_D60: Final[Tuple[float, ...]] = (
    1.5845818534, -0.3294257459, -0.2551561074,
    -0.1564667788, 1.1651831012, -0.0087163224,
    0.0112098032, -0.0582063816, 1.0469965784,
)
PRO_PHOTO_D50_TO_P3_P3_DCI: Final[Tuple[float, ...]] = (
    1.6813667581, -0.4103212525, -0.2710455056,
    -0.1552439725, 1.1627937962, -0.0075498237,
    0.0118548933, -0.0619539238, 1.0500990305,
)
PRO_PHOTO_D50_TO_ADOBE_1998_D65: Final[Tuple[float, ...]] = (
    1.3751254094, -0.1406483539, -0.2344770555,
    -0.2309982832, 1.2297708723, 0.0012274109,
    -0.0156135806, -0.0893080510, 1.1049216316,
)
PRO_PHOTO_D50_TO_ADOBE_WIDE_D50: Final[Tuple[float, ...]] = (
    1.1138352264, 0.0667249438, -0.1805601702,
    0.0006434858, 0.9596999778, 0.0396565364,
    -0.0000430816, -0.0642521869, 1.0642952685,
)
PRO_PHOTO_D50_TO_APPLE_D65: Final[Tuple[float, ...]] = (
    1.8641614757, -0.5451387458, -0.3190227299,
    -0.2874027392, 1.2977313177, -0.0103285785,
    -0.0010843035, -0.1895738666, 1.1906581701,
)
APPLE_D65_TO_BT709_D65: Final[Tuple[float, ...]] = (
    1.0687054989, -0.0785953196, 0.0098898208,
    0.0241104155, 0.9600703144, 0.0158192701,
    0.0017350289, 0.0297475760, 0.9685173950,
)
APPLE_D65_TO_BT2020_D65: Final[Tuple[float, ...]] = (
    0.6785752668, 0.2680749118, 0.0533498214,
    0.0960473510, 0.8777207586, 0.0262318904,
    0.0212004519, 0.1098674582, 0.8689320898,
)
APPLE_D65_TO_AP1_D60: Final[Tuple[float, ...]] = (
    0.6645008730, 0.2747255446, 0.0607735824,
    0.0975544085, 0.8746450887, 0.0278005028,
    0.0258391902, 0.1281981294, 0.8459626804,
)
APPLE_D65_TO_AP0_D60: Final[Tuple[float, ...]] = (
    0.4800264231, 0.3351568182, 0.1848167587,
    0.1160851209, 0.7765058619, 0.1074090172,
    0.0225998076, 0.1303946472, 0.8470055452,
)
APPLE_D65_TO_CIE_RGB_E: Final[Tuple[float, ...]] = (
    0.9090865901, 0.1392501719, -0.0483367620,
    0.1229125102, 0.7777046170, 0.0993828728,
    0.0210619830, 0.1231124503, 0.8558255667,
)
APPLE_D65_TO_CIE_XYZ_D65: Final[Tuple[float, ...]] = (
    0.4497288366, 0.3162486094, 0.1844925540,
    0.2446524871, 0.6720282950, 0.0833192180,
    0.0251848148, 0.1411824149, 0.9224627702,
)
APPLE_D65_TO_P3_D65: Final[Tuple[float, ...]] = (
    0.8832779429, 0.1057796914, 0.0109423657,
    0.0587910230, 0.9255865650, 0.0156224120,
    0.0215887926, 0.0952621735, 0.8831490339,
)
APPLE_D65_TO_P3_D60: Final[Tuple[float, ...]] = (
    0.8675124949, 0.1133628107, 0.0191246944,
    0.0586707149, 0.9249064872, 0.0164227979,
    0.0209169048, 0.0933263752, 0.8857567200,
)
APPLE_D65_TO_P3_P3_DCI: Final[Tuple[float, ...]] = (
    0.9127106301, 0.0697775145, 0.0175118554,
    0.0590952735, 0.9234015191, 0.0175032074,
    0.0208744168, 0.0907965316, 0.8883290516,
)
APPLE_D65_TO_ADOBE_1998_D65: Final[Tuple[float, ...]] = (
    0.7711658931, 0.2172553580, 0.0115787489,
    0.0241104155, 0.9600703144, 0.0158192701,
    0.0026562350, 0.0680494363, 0.9292943287,
)
APPLE_D65_TO_ADOBE_WIDE_D50: Final[Tuple[float, ...]] = (
    0.6479637896, 0.3272307406, 0.0248054698,
    0.1240944127, 0.8023890939, 0.0735164934,
    0.0140064111, 0.0876093682, 0.8983842207,
)
APPLE_D65_TO_PRO_PHOTO_D50: Final[Tuple[float, ...]] = (
    0.5774603598, 0.2655127501, 0.1570268902,
    0.1280540142, 0.8304317027, 0.0415142830,
    0.0209143460, 0.1324612296, 0.8466244245,
)

_Key = Tuple[RgbPrimaries, WhitePoint, RgbPrimaries, WhitePoint]

_ENTRIES: Final[Tuple[Tuple[_Key, Tuple[float, ...]], ...]] = (
    ((RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.BT2020, WhitePoint.D65), BT709_D65_TO_BT2020_D65),
    ((RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.AP1, WhitePoint.D60), BT709_D65_TO_AP1_D60),
    ((RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.AP0, WhitePoint.D60), BT709_D65_TO_AP0_D60),
    ((RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.CIE_RGB, WhitePoint.E), BT709_D65_TO_CIE_RGB_E),
    ((RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.CIE_XYZ, WhitePoint.D65), BT709_D65_TO_CIE_XYZ_D65),
    ((RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.D65), BT709_D65_TO_P3_D65),
    ((RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.D60), BT709_D65_TO_P3_D60),
    ((RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.P3_DCI), BT709_D65_TO_P3_P3_DCI),
    ((RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.ADOBE_1998, WhitePoint.D65), BT709_D65_TO_ADOBE_1998_D65),
    ((RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.ADOBE_WIDE, WhitePoint.D50), BT709_D65_TO_ADOBE_WIDE_D50),
    ((RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.PRO_PHOTO, WhitePoint.D50), BT709_D65_TO_PRO_PHOTO_D50),
    ((RgbPrimaries.BT709, WhitePoint.D65, RgbPrimaries.APPLE, WhitePoint.D65), BT709_D65_TO_APPLE_D65),
    ((RgbPrimaries.BT2020, WhitePoint.D65, RgbPrimaries.BT709, WhitePoint.D65), BT2020_D65_TO_BT709_D65),
    ((RgbPrimaries.BT2020, WhitePoint.D65, RgbPrimaries.AP1, WhitePoint.D60), BT2020_D65_TO_AP1_D60),
    ((RgbPrimaries.BT2020, WhitePoint.D65, RgbPrimaries.AP0, WhitePoint.D60), BT2020_D65_TO_AP0_D60),
    ((RgbPrimaries.BT2020, WhitePoint.D65, RgbPrimaries.CIE_RGB, WhitePoint.E), BT2020_D65_TO_CIE_RGB_E),
    ((RgbPrimaries.BT2020, WhitePoint.D65, RgbPrimaries.CIE_XYZ, WhitePoint.D65), BT2020_D65_TO_CIE_XYZ_D65),
    ((RgbPrimaries.BT2020, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.D65), BT2020_D65_TO_P3_D65),
    ((RgbPrimaries.BT2020, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.D60), BT2020_D65_TO_P3_D60),
    ((RgbPrimaries.BT2020, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.P3_DCI), BT2020_D65_TO_P3_P3_DCI),
    ((RgbPrimaries.BT2020, WhitePoint.D65, RgbPrimaries.ADOBE_1998, WhitePoint.D65), BT2020_D65_TO_ADOBE_1998_D65),
    ((RgbPrimaries.BT2020, WhitePoint.D65, RgbPrimaries.ADOBE_WIDE, WhitePoint.D50), BT2020_D65_TO_ADOBE_WIDE_D50),
    ((RgbPrimaries.BT2020, WhitePoint.D65, RgbPrimaries.PRO_PHOTO, WhitePoint.D50), BT2020_D65_TO_PRO_PHOTO_D50),
    ((RgbPrimaries.BT2020, WhitePoint.D65, RgbPrimaries.APPLE, WhitePoint.D65), BT2020_D65_TO_APPLE_D65),
    ((RgbPrimaries.AP1, WhitePoint.D60, RgbPrimaries.BT709, WhitePoint.D65), AP1_D60_TO_BT709_D65),
    ((RgbPrimaries.AP1, WhitePoint.D60, RgbPrimaries.BT2020, WhitePoint.D65), AP1_D60_TO_BT2020_D65),
    ((RgbPrimaries.AP1, WhitePoint.D60, RgbPrimaries.AP0, WhitePoint.D60), AP1_D60_TO_AP0_D60),
    ((RgbPrimaries.AP1, WhitePoint.D60, RgbPrimaries.CIE_RGB, WhitePoint.E), AP1_D60_TO_CIE_RGB_E),
    ((RgbPrimaries.AP1, WhitePoint.D60, RgbPrimaries.CIE_XYZ, WhitePoint.D65), AP1_D60_TO_CIE_XYZ_D65),
    ((RgbPrimaries.AP1, WhitePoint.D60, RgbPrimaries.P3, WhitePoint.D65), AP1_D60_TO_P3_D65),
    ((RgbPrimaries.AP1, WhitePoint.D60, RgbPrimaries.P3, WhitePoint.D60), AP1_D60_TO_P3_D60),
    ((RgbPrimaries.AP1, WhitePoint.D60, RgbPrimaries.P3, WhitePoint.P3_DCI), AP1_D60_TO_P3_P3_DCI),
    ((RgbPrimaries.AP1, WhitePoint.D60, RgbPrimaries.ADOBE_1998, WhitePoint.D65), AP1_D60_TO_ADOBE_1998_D65),
    ((RgbPrimaries.AP1, WhitePoint.D60, RgbPrimaries.ADOBE_WIDE, WhitePoint.D50), AP1_D60_TO_ADOBE_WIDE_D50),
    ((RgbPrimaries.AP1, WhitePoint.D60, RgbPrimaries.PRO_PHOTO, WhitePoint.D50), AP1_D60_TO_PRO_PHOTO_D50),
    ((RgbPrimaries.AP1, WhitePoint.D60, RgbPrimaries.APPLE, WhitePoint.D65), AP1_D60_TO_APPLE_D65),
    ((RgbPrimaries.AP0, WhitePoint.D60, RgbPrimaries.BT709, WhitePoint.D65), AP0_D60_TO_BT709_D65),
    ((RgbPrimaries.AP0, WhitePoint.D60, RgbPrimaries.BT2020, WhitePoint.D65), AP0_D60_TO_BT2020_D65),
    ((RgbPrimaries.AP0, WhitePoint.D60, RgbPrimaries.AP1, WhitePoint.D60), AP0_D60_TO_AP1_D60),
    ((RgbPrimaries.AP0, WhitePoint.D60, RgbPrimaries.CIE_RGB, WhitePoint.E), AP0_D60_TO_CIE_RGB_E),
    ((RgbPrimaries.AP0, WhitePoint.D60, RgbPrimaries.CIE_XYZ, WhitePoint.D65), AP0_D60_TO_CIE_XYZ_D65),
    ((RgbPrimaries.AP0, WhitePoint.D60, RgbPrimaries.P3, WhitePoint.D65), AP0_D60_TO_P3_D65),
    ((RgbPrimaries.AP0, WhitePoint.D60, RgbPrimaries.P3, WhitePoint.D60), AP0_D60_TO_P3_D60),
    ((RgbPrimaries.AP0, WhitePoint.D60, RgbPrimaries.P3, WhitePoint.P3_DCI), AP0_D60_TO_P3_P3_DCI),
    ((RgbPrimaries.AP0, WhitePoint.D60, RgbPrimaries.ADOBE_1998, WhitePoint.D65), AP0_D60_TO_ADOBE_1998_D65),
    ((RgbPrimaries.AP0, WhitePoint.D60, RgbPrimaries.ADOBE_WIDE, WhitePoint.D50), AP0_D60_TO_ADOBE_WIDE_D50),
    ((RgbPrimaries.AP0, WhitePoint.D60, RgbPrimaries.PRO_PHOTO, WhitePoint.D50), AP0_D60_TO_PRO_PHOTO_D50),
    ((RgbPrimaries.AP0, WhitePoint.D60, RgbPrimaries.APPLE, WhitePoint.D65), AP0_D60_TO_APPLE_D65),
    ((RgbPrimaries.CIE_RGB, WhitePoint.E, RgbPrimaries.BT709, WhitePoint.D65), CIE_RGB_E_TO_BT709_D65),
    ((RgbPrimaries.CIE_RGB, WhitePoint.E, RgbPrimaries.BT2020, WhitePoint.D65), CIE_RGB_E_TO_BT2020_D65),
    ((RgbPrimaries.CIE_RGB, WhitePoint.E, RgbPrimaries.AP1, WhitePoint.D60), CIE_RGB_E_TO_AP1_D60),
    ((RgbPrimaries.CIE_RGB, WhitePoint.E, RgbPrimaries.AP0, WhitePoint.D60), CIE_RGB_E_TO_AP0_D60),
    ((RgbPrimaries.CIE_RGB, WhitePoint.E, RgbPrimaries.CIE_XYZ, WhitePoint.D65), CIE_RGB_E_TO_CIE_XYZ_D65),
    ((RgbPrimaries.CIE_RGB, WhitePoint.E, RgbPrimaries.P3, WhitePoint.D65), CIE_RGB_E_TO_P3_D65),
    ((RgbPrimaries.CIE_RGB, WhitePoint.E, RgbPrimaries.P3, WhitePoint.D60), CIE_RGB_E_TO_P3_D60),
    ((RgbPrimaries.CIE_RGB, WhitePoint.E, RgbPrimaries.P3, WhitePoint.P3_DCI), CIE_RGB_E_TO_P3_P3_DCI),
    ((RgbPrimaries.CIE_RGB, WhitePoint.E, RgbPrimaries.ADOBE_1998, WhitePoint.D65), CIE_RGB_E_TO_ADOBE_1998_D65),
    ((RgbPrimaries.CIE_RGB, WhitePoint.E, RgbPrimaries.ADOBE_WIDE, WhitePoint.D50), CIE_RGB_E_TO_ADOBE_WIDE_D50),
    ((RgbPrimaries.CIE_RGB, WhitePoint.E, RgbPrimaries.PRO_PHOTO, WhitePoint.D50), CIE_RGB_E_TO_PRO_PHOTO_D50),
    ((RgbPrimaries.CIE_RGB, WhitePoint.E, RgbPrimaries.APPLE, WhitePoint.D65), CIE_RGB_E_TO_APPLE_D65),
    ((RgbPrimaries.CIE_XYZ, WhitePoint.D65, RgbPrimaries.BT709, WhitePoint.D65), CIE_XYZ_D65_TO_BT709_D65),
    ((RgbPrimaries.CIE_XYZ, WhitePoint.D65, RgbPrimaries.BT2020, WhitePoint.D65), CIE_XYZ_D65_TO_BT2020_D65),
    ((RgbPrimaries.CIE_XYZ, WhitePoint.D65, RgbPrimaries.AP1, WhitePoint.D60), CIE_XYZ_D65_TO_AP1_D60),
    ((RgbPrimaries.CIE_XYZ, WhitePoint.D65, RgbPrimaries.AP0, WhitePoint.D60), CIE_XYZ_D65_TO_AP0_D60),
    ((RgbPrimaries.CIE_XYZ, WhitePoint.D65, RgbPrimaries.CIE_RGB, WhitePoint.E), CIE_XYZ_D65_TO_CIE_RGB_E),
    ((RgbPrimaries.CIE_XYZ, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.D65), CIE_XYZ_D65_TO_P3_D65),
    ((RgbPrimaries.CIE_XYZ, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.D60), CIE_XYZ_D65_TO_P3_D60),
    ((RgbPrimaries.CIE_XYZ, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.P3_DCI), CIE_XYZ_D65_TO_P3_P3_DCI),
    ((RgbPrimaries.CIE_XYZ, WhitePoint.D65, RgbPrimaries.ADOBE_1998, WhitePoint.D65), CIE_XYZ_D65_TO_ADOBE_1998_D65),
    ((RgbPrimaries.CIE_XYZ, WhitePoint.D65, RgbPrimaries.ADOBE_WIDE, WhitePoint.D50), CIE_XYZ_D65_TO_ADOBE_WIDE_D50),
    ((RgbPrimaries.CIE_XYZ, WhitePoint.D65, RgbPrimaries.PRO_PHOTO, WhitePoint.D50), CIE_XYZ_D65_TO_PRO_PHOTO_D50),
    ((RgbPrimaries.CIE_XYZ, WhitePoint.D65, RgbPrimaries.APPLE, WhitePoint.D65), CIE_XYZ_D65_TO_APPLE_D65),
    ((RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.BT709, WhitePoint.D65), P3_D65_TO_BT709_D65),
    ((RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.BT2020, WhitePoint.D65), P3_D65_TO_BT2020_D65),
    ((RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.AP1, WhitePoint.D60), P3_D65_TO_AP1_D60),
    ((RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.AP0, WhitePoint.D60), P3_D65_TO_AP0_D60),
    ((RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.CIE_RGB, WhitePoint.E), P3_D65_TO_CIE_RGB_E),
    ((RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.CIE_XYZ, WhitePoint.D65), P3_D65_TO_CIE_XYZ_D65),
    ((RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.D60), P3_D65_TO_P3_D60),
    ((RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.P3_DCI), P3_D65_TO_P3_P3_DCI),
    ((RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.ADOBE_1998, WhitePoint.D65), P3_D65_TO_ADOBE_1998_D65),
    ((RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.ADOBE_WIDE, WhitePoint.D50), P3_D65_TO_ADOBE_WIDE_D50),
    ((RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.PRO_PHOTO, WhitePoint.D50), P3_D65_TO_PRO_PHOTO_D50),
    ((RgbPrimaries.P3, WhitePoint.D65, RgbPrimaries.APPLE, WhitePoint.D65), P3_D65_TO_APPLE_D65),
    ((RgbPrimaries.P3, WhitePoint.D60, RgbPrimaries.BT709, WhitePoint.D65), P3_D60_TO_BT709_D65),
    ((RgbPrimaries.P3, WhitePoint.D60, RgbPrimaries.BT2020, WhitePoint.D65), P3_D60_TO_BT2020_D65),
    ((RgbPrimaries.P3, WhitePoint.D60, RgbPrimaries.AP1, WhitePoint.D60), P3_D60_TO_AP1_D60),
    ((RgbPrimaries.P3, WhitePoint.D60, RgbPrimaries.AP0, WhitePoint.D60), P3_D60_TO_AP0_D60),
    ((RgbPrimaries.P3, WhitePoint.D60, RgbPrimaries.CIE_RGB, WhitePoint.E), P3_D60_TO_CIE_RGB_E),
    ((RgbPrimaries.P3, WhitePoint.D60, RgbPrimaries.CIE_XYZ, WhitePoint.D65), P3_D60_TO_CIE_XYZ_D65),
    ((RgbPrimaries.P3, WhitePoint.D60, RgbPrimaries.P3, WhitePoint.D65), P3_D60_TO_P3_D65),
    ((RgbPrimaries.P3, WhitePoint.D60, RgbPrimaries.P3, WhitePoint.P3_DCI), P3_D60_TO_P3_P3_DCI),
    ((RgbPrimaries.P3, WhitePoint.D60, RgbPrimaries.ADOBE_1998, WhitePoint.D65), P3_D60_TO_ADOBE_1998_D65),
    ((RgbPrimaries.P3, WhitePoint.D60, RgbPrimaries.ADOBE_WIDE, WhitePoint.D50), P3_D60_TO_ADOBE_WIDE_D50),
    ((RgbPrimaries.P3, WhitePoint.D60, RgbPrimaries.PRO_PHOTO, WhitePoint.D50), P3_D60_TO_PRO_PHOTO_D50),
    ((RgbPrimaries.P3, WhitePoint.D60, RgbPrimaries.APPLE, WhitePoint.D65), P3_D60_TO_APPLE_D65),
    ((RgbPrimaries.P3, WhitePoint.P3_DCI, RgbPrimaries.BT709, WhitePoint.D65), P3_P3_DCI_TO_BT709_D65),
    ((RgbPrimaries.P3, WhitePoint.P3_DCI, RgbPrimaries.BT2020, WhitePoint.D65), P3_P3_DCI_TO_BT2020_D65),
    ((RgbPrimaries.P3, WhitePoint.P3_DCI, RgbPrimaries.AP1, WhitePoint.D60), P3_P3_DCI_TO_AP1_D60),
    ((RgbPrimaries.P3, WhitePoint.P3_DCI, RgbPrimaries.AP0, WhitePoint.D60), P3_P3_DCI_TO_AP0_D60),
    ((RgbPrimaries.P3, WhitePoint.P3_DCI, RgbPrimaries.CIE_RGB, WhitePoint.E), P3_P3_DCI_TO_CIE_RGB_E),
    ((RgbPrimaries.P3, WhitePoint.P3_DCI, RgbPrimaries.CIE_XYZ, WhitePoint.D65), P3_P3_DCI_TO_CIE_XYZ_D65),
    ((RgbPrimaries.P3, WhitePoint.P3_DCI, RgbPrimaries.P3, WhitePoint.D65), P3_P3_DCI_TO_P3_D65),
    ((RgbPrimaries.P3, WhitePoint.P3_DCI, RgbPrimaries.P3, WhitePoint.D60), P3_P3_DCI_TO_P3_D60),
    ((RgbPrimaries.P3, WhitePoint.P3_DCI, RgbPrimaries.ADOBE_1998, WhitePoint.D65), P3_P3_DCI_TO_ADOBE_1998_D65),
    ((RgbPrimaries.P3, WhitePoint.P3_DCI, RgbPrimaries.ADOBE_WIDE, WhitePoint.D50), P3_P3_DCI_TO_ADOBE_WIDE_D50),
    ((RgbPrimaries.P3, WhitePoint.P3_DCI, RgbPrimaries.PRO_PHOTO, WhitePoint.D50), P3_P3_DCI_TO_PRO_PHOTO_D50),
    ((RgbPrimaries.P3, WhitePoint.P3_DCI, RgbPrimaries.APPLE, WhitePoint.D65), P3_P3_DCI_TO_APPLE_D65),
    ((RgbPrimaries.ADOBE_1998, WhitePoint.D65, RgbPrimaries.BT709, WhitePoint.D65), ADOBE_1998_D65_TO_BT709_D65),
    ((RgbPrimaries.ADOBE_1998, WhitePoint.D65, RgbPrimaries.BT2020, WhitePoint.D65), ADOBE_1998_D65_TO_BT2020_D65),
    ((RgbPrimaries.ADOBE_1998, WhitePoint.D65, RgbPrimaries.AP1, WhitePoint.D60), ADOBE_1998_D65_TO_AP1_D60),
    ((RgbPrimaries.ADOBE_1998, WhitePoint.D65, RgbPrimaries.AP0, WhitePoint.D60), ADOBE_1998_D65_TO_AP0_D60),
    ((RgbPrimaries.ADOBE_1998, WhitePoint.D65, RgbPrimaries.CIE_RGB, WhitePoint.E), ADOBE_1998_D65_TO_CIE_RGB_E),
    ((RgbPrimaries.ADOBE_1998, WhitePoint.D65, RgbPrimaries.CIE_XYZ, WhitePoint.D65), ADOBE_1998_D65_TO_CIE_XYZ_D65),
    ((RgbPrimaries.ADOBE_1998, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.D65), ADOBE_1998_D65_TO_P3_D65),
    ((RgbPrimaries.ADOBE_1998, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.D60), ADOBE_1998_D65_TO_P3_D60),
    ((RgbPrimaries.ADOBE_1998, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.P3_DCI), ADOBE_1998_D65_TO_P3_P3_DCI),
    ((RgbPrimaries.ADOBE_1998, WhitePoint.D65, RgbPrimaries.ADOBE_WIDE, WhitePoint.D50), ADOBE_1998_D65_TO_ADOBE_WIDE_D50),
    ((RgbPrimaries.ADOBE_1998, WhitePoint.D65, RgbPrimaries.PRO_PHOTO, WhitePoint.D50), ADOBE_1998_D65_TO_PRO_PHOTO_D50),
    ((RgbPrimaries.ADOBE_1998, WhitePoint.D65, RgbPrimaries.APPLE, WhitePoint.D65), ADOBE_1998_D65_TO_APPLE_D65),
    ((RgbPrimaries.ADOBE_WIDE, WhitePoint.D50, RgbPrimaries.BT709, WhitePoint.D65), ADOBE_WIDE_D50_TO_BT709_D65),
    ((RgbPrimaries.ADOBE_WIDE, WhitePoint.D50, RgbPrimaries.BT2020, WhitePoint.D65), ADOBE_WIDE_D50_TO_BT2020_D65),
    ((RgbPrimaries.ADOBE_WIDE, WhitePoint.D50, RgbPrimaries.AP1, WhitePoint.D60), ADOBE_WIDE_D50_TO_AP1_D60),
    ((RgbPrimaries.ADOBE_WIDE, WhitePoint.D50, RgbPrimaries.AP0, WhitePoint.D60), ADOBE_WIDE_D50_TO_AP0_D60),
    ((RgbPrimaries.ADOBE_WIDE, WhitePoint.D50, RgbPrimaries.CIE_RGB, WhitePoint.E), ADOBE_WIDE_D50_TO_CIE_RGB_E),
    ((RgbPrimaries.ADOBE_WIDE, WhitePoint.D50, RgbPrimaries.CIE_XYZ, WhitePoint.D65), ADOBE_WIDE_D50_TO_CIE_XYZ_D65),
    ((RgbPrimaries.ADOBE_WIDE, WhitePoint.D50, RgbPrimaries.P3, WhitePoint.D65), ADOBE_WIDE_D50_TO_P3_D65),
    ((RgbPrimaries.ADOBE_WIDE, WhitePoint.D50, RgbPrimaries.P3, WhitePoint.D60), ADOBE_WIDE_D50_TO_P3_D60),
    ((RgbPrimaries.ADOBE_WIDE, WhitePoint.D50, RgbPrimaries.P3, WhitePoint.P3_DCI), ADOBE_WIDE_D50_TO_P3_P3_DCI),
    ((RgbPrimaries.ADOBE_WIDE, WhitePoint.D50, RgbPrimaries.ADOBE_1998, WhitePoint.D65), ADOBE_WIDE_D50_TO_ADOBE_1998_D65),
    ((RgbPrimaries.ADOBE_WIDE, WhitePoint.D50, RgbPrimaries.PRO_PHOTO, WhitePoint.D50), ADOBE_WIDE_D50_TO_PRO_PHOTO_D50),
    ((RgbPrimaries.ADOBE_WIDE, WhitePoint.D50, RgbPrimaries.APPLE, WhitePoint.D65), ADOBE_WIDE_D50_TO_APPLE_D65),
    ((RgbPrimaries.PRO_PHOTO, WhitePoint.D50, RgbPrimaries.BT709, WhitePoint.D65), PRO_PHOTO_D50_TO_BT709_D65),
    ((RgbPrimaries.PRO_PHOTO, WhitePoint.D50, RgbPrimaries.BT2020, WhitePoint.D65), PRO_PHOTO_D50_TO_BT2020_D65),
    ((RgbPrimaries.PRO_PHOTO, WhitePoint.D50, RgbPrimaries.AP1, WhitePoint.D60), PRO_PHOTO_D50_TO_AP1_D60),
    ((RgbPrimaries.PRO_PHOTO, WhitePoint.D50, RgbPrimaries.AP0, WhitePoint.D60), PRO_PHOTO_D50_TO_AP0_D60),
    ((RgbPrimaries.PRO_PHOTO, WhitePoint.D50, RgbPrimaries.CIE_RGB, WhitePoint.E), PRO_PHOTO_D50_TO_CIE_RGB_E),
    ((RgbPrimaries.PRO_PHOTO, WhitePoint.D50, RgbPrimaries.CIE_XYZ, WhitePoint.D65), PRO_PHOTO_D50_TO_CIE_XYZ_D65),
    ((RgbPrimaries.PRO_PHOTO, WhitePoint.D50, RgbPrimaries.P3, WhitePoint.D65), PRO_PHOTO_D50_TO_P3_D65),
    ((RgbPrimaries.PRO_PHOTO, WhitePoint.D50, RgbPrimaries.P3, WhitePoint.D60), PRO_PHOTO_D50_TO_P3_D60),
    ((RgbPrimaries.PRO_PHOTO, WhitePoint.D50, RgbPrimaries.P3, WhitePoint.P3_DCI), PRO_PHOTO_D50_TO_P3_P3_DCI),
    ((RgbPrimaries.PRO_PHOTO, WhitePoint.D50, RgbPrimaries.ADOBE_1998, WhitePoint.D65), PRO_PHOTO_D50_TO_ADOBE_1998_D65),
    ((RgbPrimaries.PRO_PHOTO, WhitePoint.D50, RgbPrimaries.ADOBE_WIDE, WhitePoint.D50), PRO_PHOTO_D50_TO_ADOBE_WIDE_D50),
    ((RgbPrimaries.PRO_PHOTO, WhitePoint.D50, RgbPrimaries.APPLE, WhitePoint.D65), PRO_PHOTO_D50_TO_APPLE_D65),
    ((RgbPrimaries.APPLE, WhitePoint.D65, RgbPrimaries.BT709, WhitePoint.D65), APPLE_D65_TO_BT709_D65),
    ((RgbPrimaries.APPLE, WhitePoint.D65, RgbPrimaries.BT2020, WhitePoint.D65), APPLE_D65_TO_BT2020_D65),
    ((RgbPrimaries.APPLE, WhitePoint.D65, RgbPrimaries.AP1, WhitePoint.D60), APPLE_D65_TO_AP1_D60),
    ((RgbPrimaries.APPLE, WhitePoint.D65, RgbPrimaries.AP0, WhitePoint.D60), APPLE_D65_TO_AP0_D60),
    ((RgbPrimaries.APPLE, WhitePoint.D65, RgbPrimaries.CIE_RGB, WhitePoint.E), APPLE_D65_TO_CIE_RGB_E),
    ((RgbPrimaries.APPLE, WhitePoint.D65, RgbPrimaries.CIE_XYZ, WhitePoint.D65), APPLE_D65_TO_CIE_XYZ_D65),
    ((RgbPrimaries.APPLE, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.D65), APPLE_D65_TO_P3_D65),
    ((RgbPrimaries.APPLE, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.D60), APPLE_D65_TO_P3_D60),
    ((RgbPrimaries.APPLE, WhitePoint.D65, RgbPrimaries.P3, WhitePoint.P3_DCI), APPLE_D65_TO_P3_P3_DCI),
    ((RgbPrimaries.APPLE, WhitePoint.D65, RgbPrimaries.ADOBE_1998, WhitePoint.D65), APPLE_D65_TO_ADOBE_1998_D65),
    ((RgbPrimaries.APPLE, WhitePoint.D65, RgbPrimaries.ADOBE_WIDE, WhitePoint.D50), APPLE_D65_TO_ADOBE_WIDE_D50),
    ((RgbPrimaries.APPLE, WhitePoint.D65, RgbPrimaries.PRO_PHOTO, WhitePoint.D50), APPLE_D65_TO_PRO_PHOTO_D50),
)


def _freeze(values: Tuple[float, ...]) -> ArrayFloat:
    matrix = np.array(values, dtype=np.float64).reshape(3, 3)
    matrix.setflags(write=False)
    return matrix


_TABLE: Final[dict[_Key, ArrayFloat]] = {key: _freeze(values) for key, values in _ENTRIES}
_IDENTITY: Final[ArrayFloat] = _freeze((1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0))


def const_conversion_matrix(
    src_primaries: RgbPrimaries,
    src_wp: WhitePoint,
    dst_primaries: RgbPrimaries,
    dst_wp: WhitePoint,
) -> Optional[ArrayFloat]:
    """
    Looks up a precomputed src -> dst matrix.

    Returns:
        Read-only float64 (3, 3) matrix, the identity when source and
        destination bases match, or None if the pair is not tabulated.
    """
    if src_primaries is dst_primaries and src_wp is dst_wp:
        return _IDENTITY
    return _TABLE.get((src_primaries, src_wp, dst_primaries, dst_wp))
