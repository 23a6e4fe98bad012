"""Butterfly kernels for transform lengths 2, 10 and 12.

Each kernel reads ``length`` elements of ``data`` starting at ``offset``
with spacing ``stride``, multiplies element ``n`` by the twiddle factor
with index ``twiddle_start + n * twiddle_increment`` and replaces the
elements by their discrete Fourier transform with kernel
``exp(+2*pi*i*k*n/length)``, in natural order.
"""

_SQRT5_QUARTER = 0.5590169943749474241
_C10_A = 1.5388417685876267013
_C10_B = 0.36327126400268044295
_C10_C = 0.58778525229247312917
_SQRT3_HALF = 0.86602540378443864676


def _loader(phasors, data, positions, twiddle_start, twiddle_increment):
    multiply = phasors.multiply

    def load(n):
        return multiply(data[positions[n]], twiddle_start + n * twiddle_increment)

    return load


def butterfly_2(phasors, data, offset, stride, twiddle_start, twiddle_increment):
    """Length-2 transform in place."""
    pos = range(offset, offset + 2 * stride, stride)
    load = _loader(phasors, data, pos, twiddle_start, twiddle_increment)
    r2 = load(1)
    s1 = load(0)
    data[pos[1]] = s1 - r2
    data[pos[0]] = r2 + s1


def butterfly_10(phasors, data, offset, stride, twiddle_start, twiddle_increment):
    """Length-10 transform in place."""
    pos = range(offset, offset + 10 * stride, stride)
    load = _loader(phasors, data, pos, twiddle_start, twiddle_increment)

    r10 = load(9)
    s1 = load(1)
    r12 = s1 - r10
    r20 = r10 + s1

    s1 = load(3)
    s2 = load(7)
    r14 = s1 - s2
    s3 = s1 + s2
    r28 = s3 - r20
    r30 = r20 + s3

    s1 = load(5)
    r38 = r30 + s1
    r54 = -1.25 * r30

    x0 = load(0)
    r3 = load(2)
    r5 = load(4)
    r7 = load(6)
    r9 = load(8)
    r17 = r5 + r7
    r19 = r3 + r9
    r29 = r17 + r19
    r33 = x0 + r29
    data[pos[5]] = r33 - r38
    data[pos[0]] = r38 + r33
    r66 = r38 + r54

    s1 = _SQRT5_QUARTER * r28
    r76 = s1 - r66
    r78 = r66 + s1

    s1 = -1j * _C10_A * r14
    s2 = r12 - r14
    s3 = 1j * _C10_B * r12
    s4 = -1j * _C10_C * s2
    s5 = s1 + s4
    r70 = s3 - s4
    r82 = s5 - r78
    r88 = r78 + s5

    s1 = r5 - r7
    s2 = r3 - r9
    s3 = -1j * _C10_B * s1
    s4 = s2 - s1
    s5 = 1j * _C10_A * s2
    s6 = r17 - r19
    s7 = -1j * _C10_C * s4
    s8 = -_SQRT5_QUARTER * s6
    s9 = -1.25 * r29
    r73 = s3 - s7
    s10 = s5 + s7
    s11 = r33 + s9
    r75 = s8 - s11
    s12 = s8 + s11
    r81 = s10 - s12
    s13 = s10 + s12
    data[pos[1]] = s13 - r88
    data[pos[6]] = r88 + s13

    data[pos[4]] = -r82 - r81
    data[pos[9]] = r82 - r81
    r85 = r75 - r73
    r83 = r73 + r75

    r80 = r70 - r76
    s1 = r76 + r70
    data[pos[8]] = -r83 - s1
    data[pos[3]] = s1 - r83

    data[pos[7]] = -r85 - r80
    data[pos[2]] = r80 - r85


def butterfly_12(phasors, data, offset, stride, twiddle_start, twiddle_increment):
    """Length-12 transform in place."""
    pos = range(offset, offset + 12 * stride, stride)
    load = _loader(phasors, data, pos, twiddle_start, twiddle_increment)

    r12 = load(11)
    s1 = load(7)
    r20 = s1 - r12
    r24 = r12 + s1

    s1 = load(1)
    s2 = load(3)
    s3 = load(5)
    s4 = load(9)
    r14 = s1 - s3
    s5 = s1 + s3
    r34 = s4 + s5
    r28 = r24 + s2
    r42 = s5 - r24
    r48 = r24 + s5

    r60 = -1.5 * r48

    x0 = load(0)
    r3 = load(2)
    r5 = load(4)
    x6 = load(6)
    r9 = load(8)
    r11 = load(10)
    r21 = r5 + r9
    r23 = r3 + r11
    r25 = x0 + r21
    r31 = x6 + r23
    r43 = r25 + r31
    r40 = r28 - r34
    s3 = r34 + r28
    data[pos[6]] = r43 - s3
    data[pos[0]] = r43 + s3
    r72 = r60 + s3

    r38 = r14 - r20
    s1 = r20 + r14
    s2 = 1j * _SQRT3_HALF * s1
    r80 = s2 - r72
    r84 = r72 + s2

    s1 = r5 - r9
    s2 = r3 - r11
    s3 = s2 - s1
    r41 = s1 + s2
    r45 = r21 - r23
    s4 = r21 + r23
    s5 = -1j * _SQRT3_HALF * s3
    s6 = -1.5 * s4
    s7 = r43 + s6
    r75 = s5 - s7
    s8 = s5 + s7
    data[pos[10]] = s8 - r84
    data[pos[4]] = r84 + s8

    data[pos[8]] = -r80 - r75
    data[pos[2]] = r80 - r75
    r57 = -1.5 * r45

    s1 = r25 - r31
    r69 = r57 + s1
    data[pos[3]] = s1 - 1j * r40
    data[pos[9]] = s1 + 1j * r40

    s1 = 1j * _SQRT3_HALF * r41
    r77 = s1 - r69
    r81 = r69 + s1

    s1 = _SQRT3_HALF * r38
    s2 = 1.5j * r42
    s3 = s2 + 1j * r40
    r74 = s1 - s3
    s4 = s1 + s3
    data[pos[7]] = r81 - s4
    data[pos[1]] = r81 + s4

    data[pos[5]] = -r77 - r74
    data[pos[11]] = r74 - r77