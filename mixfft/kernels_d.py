"""Butterfly kernels for transform lengths 16 and 18.

Each kernel reads ``length`` elements of ``data`` starting at ``offset``
with spacing ``stride``, multiplies element ``n`` by the twiddle factor
with index ``twiddle_start + n * twiddle_increment`` and replaces the
elements by their discrete Fourier transform with kernel
``exp(+2*pi*i*k*n/length)``, in natural order.
"""

_HALF_SQRT2 = 0.7071067811865475244
_COS_3PI_8 = 0.38268343236508977173
_SIN_3PI_8 = 0.92387953251128675613

_SQRT3_HALF = 0.86602540378443864676
_COS_2PI_9 = 0.7660444431189780352
_SIN_2PI_9 = 0.64278760968653932632
_COS_4PI_9 = 0.17364817766693034885
_SIN_4PI_9 = 0.98480775301220805937
_COS_PI_9 = 0.93969262078590838405
_SIN_PI_9 = 0.34202014332566873304


def _loader(phasors, data, positions, twiddle_start, twiddle_increment):
    multiply = phasors.multiply

    def load(n):
        return multiply(data[positions[n]], twiddle_start + n * twiddle_increment)

    return load


def butterfly_16(phasors, data, offset, stride, twiddle_start, twiddle_increment):
    """Length-16 transform in place."""
    pos = range(offset, offset + 16 * stride, stride)
    load = _loader(phasors, data, pos, twiddle_start, twiddle_increment)

    w8 = _HALF_SQRT2 * (1 + 1j)
    w8_3 = _HALF_SQRT2 * (-1 + 1j)
    w16_a = complex(-_COS_3PI_8, _SIN_3PI_8)
    w16_b = complex(-_SIN_3PI_8, _COS_3PI_8)
    w16_c = complex(-_SIN_3PI_8, -_COS_3PI_8)
    w16_d = complex(_COS_3PI_8, _SIN_3PI_8)

    r16 = load(15)
    s1 = load(7)
    r40 = s1 - r16
    r48 = r16 + s1

    s1 = load(3)
    s2 = load(11)
    r36 = s1 - s2
    s3 = s1 + s2
    r76 = s3 - r48
    r80 = r48 + s3

    s1, s2, s3, s4 = (load(n) for n in (1, 5, 9, 13))
    r34 = s1 - s3
    s5 = s1 + s3
    r38 = s2 - s4
    s6 = s2 + s4
    r74 = s5 - s6
    s7 = s5 + s6
    r126 = s7 - r80
    r128 = r80 + s7

    s1, s2, s3, s4, s5, s6, s7, s8 = (load(n) for n in range(0, 16, 2))
    r17 = s1 - s5
    s9 = s1 + s5
    r35 = s2 - s6
    s10 = s2 + s6
    r21 = s3 - s7
    s11 = s3 + s7
    r39 = s4 - s8
    s12 = s4 + s8
    r41 = s9 - s11
    s13 = s9 + s11
    r75 = s10 - s12
    s14 = s10 + s12
    r93 = s13 - s14
    s15 = s13 + s14
    data[pos[8]] = s15 - r128
    data[pos[0]] = r128 + s15

    data[pos[12]] = r93 - 1j * r126
    data[pos[4]] = r93 + 1j * r126
    r91 = r75 - 1j * r41
    r89 = r41 - 1j * r75

    s1 = w8 * r74
    s2 = w8_3 * r76
    s3 = s1 - s2
    r124 = s1 + s2
    data[pos[14]] = r89 - 1j * s3
    data[pos[6]] = r89 + 1j * s3

    data[pos[10]] = 1j * r91 - r124
    data[pos[2]] = r124 + 1j * r91
    r55 = w8_3 * r39

    s1 = w8 * r35
    r67 = s1 - r55
    r71 = r55 + s1

    s1 = r21 - 1j * r17
    r33 = r17 - 1j * r21
    r87 = r71 + 1j * s1
    r85 = s1 + 1j * r71

    s1 = r38 - 1j * r34
    r66 = r34 - 1j * r38
    s2 = r40 - 1j * r36
    r68 = r36 - 1j * r40
    s3 = w16_a * s1
    s4 = w16_b * s2
    s5 = s3 - s4
    r120 = s3 + s4
    data[pos[13]] = 1j * (r85 - s5)
    data[pos[5]] = 1j * (r85 + s5)

    data[pos[9]] = r87 - r120
    data[pos[1]] = r87 + r120
    r100 = w16_c * r68

    s1 = w16_d * r66
    r114 = s1 - r100
    r116 = r100 + s1

    s1 = r67 - 1j * r33
    r81 = r33 - 1j * r67
    data[pos[11]] = 1j * s1 - r116
    data[pos[3]] = r116 + 1j * s1

    data[pos[15]] = r81 - 1j * r114
    data[pos[7]] = r81 + 1j * r114


def butterfly_18(phasors, data, offset, stride, twiddle_start, twiddle_increment):
    """Length-18 transform in place."""
    pos = range(offset, offset + 18 * stride, stride)
    load = _loader(phasors, data, pos, twiddle_start, twiddle_increment)

    w9 = complex(_COS_2PI_9, _SIN_2PI_9)
    w9_2 = complex(_COS_4PI_9, _SIN_4PI_9)
    w18_a = complex(_COS_PI_9, -_SIN_PI_9)
    w18_b = complex(-_COS_4PI_9, -_SIN_4PI_9)
    j3 = 1j * _SQRT3_HALF

    r18 = load(17)
    s1 = load(5)
    r24 = s1 - r18
    r36 = r18 + s1

    s1 = load(11)
    r48 = r36 + s1
    r72 = -1.5 * r36

    r2 = load(1)
    r8 = load(7)
    s1 = load(13)
    r26 = r2 + r8
    r50 = s1 + r26
    r138 = r48 - r50
    r140 = r48 + r50
    r90 = r48 + r72

    s1 = -j3 * r24
    r96 = s1 - r90
    r108 = r90 + s1

    r126 = w9 * r108

    s1 = r2 - r8
    s2 = j3 * s1
    s3 = -1.5 * r26
    s4 = r50 + s3
    r92 = s2 - s4
    s5 = s2 + s4
    s6 = w9_2 * s5
    r134 = s6 - r126
    r144 = r126 + s6

    s1 = load(3)
    s2 = load(9)
    s3 = load(15)
    s4 = s1 - s3
    s5 = s1 + s3
    s6 = -j3 * s4
    s7 = s2 + s5
    s8 = -1.5 * s5
    s9 = s7 + s8
    r94 = s6 - s9
    s10 = s6 + s9
    r154 = r140 + s7
    r160 = r144 + s10
    r180 = -1.5 * r144

    s1, s2, s3, s4, s5, s6, s7, s8, s9 = (load(n) for n in range(0, 18, 2))
    s10 = s4 - s7
    s11 = s4 + s7
    s12 = s5 - s8
    s13 = s5 + s8
    s14 = s6 - s9
    s15 = s6 + s9
    r61 = j3 * s10
    r37 = s1 + s11
    s16 = -1.5 * s11
    s17 = j3 * s12
    s18 = s2 + s13
    s19 = -1.5 * s13
    s20 = j3 * s14
    s21 = s3 + s15
    s22 = -1.5 * s15
    r85 = r37 + s16
    s23 = s18 + s19
    r129 = s18 - s21
    r131 = s18 + s21
    s24 = s21 + s22
    s25 = r61 + r85
    r99 = s17 - s23
    s26 = s17 + s23
    r101 = s20 - s24
    s27 = s20 + s24
    s28 = w9 * s26
    s29 = w9_2 * s27
    r141 = s28 - s29
    s30 = s28 + s29
    r157 = s25 + s30
    s31 = -1.5 * s30
    r197 = s31 - r180
    r198 = r180 + s31

    r193 = r157 - r160
    s1 = r160 + r157
    data[pos[10]] = s1
    r216 = r198 + s1

    s1 = j3 * r141
    s2 = -j3 * r134
    r188 = s2 - s1
    s3 = s1 + s2
    data[pos[16]] = r216 - s3
    data[pos[4]] = r216 + s3

    data[pos[1]] = r193
    s1 = r197 + r193
    data[pos[13]] = s1 - r188
    data[pos[7]] = r188 + s1

    r119 = w18_a * r101
    s1 = w18_b * r99
    r135 = s1 - r119
    r137 = r119 + s1

    s1 = r61 - r85
    r151 = s1 - r137
    r173 = -1.5 * r137

    s1 = w18_a * r92
    s2 = w18_b * r96
    r128 = s1 - s2
    s3 = s1 + s2
    r148 = r94 - s3
    s4 = -1.5 * s3
    r186 = s4 - r173
    r191 = r173 + s4

    r184 = r148 - r151
    s1 = r151 + r148
    data[pos[2]] = -s1
    r209 = r191 - s1

    s1 = j3 * r135
    s2 = -j3 * r128
    r182 = s2 - s1
    s3 = s1 + s2
    data[pos[8]] = r209 - s3
    data[pos[14]] = r209 + s3

    data[pos[11]] = r184
    s1 = r186 - r184
    data[pos[5]] = -r182 - s1
    data[pos[17]] = r182 - s1

    r145 = r37 + r131
    r167 = -1.5 * r131

    s1 = -1.5 * r140
    r185 = r167 - s1
    r194 = r167 + s1

    r181 = r145 - r154
    s1 = r154 + r145
    data[pos[0]] = s1
    r212 = r194 + s1

    s1 = j3 * r129
    s2 = j3 * r138
    r183 = s1 - s2
    s3 = s1 + s2
    data[pos[6]] = r212 - s3
    data[pos[12]] = r212 + s3

    data[pos[9]] = r181
    s1 = r185 + r181
    data[pos[15]] = s1 - r183
    data[pos[3]] = r183 + s1