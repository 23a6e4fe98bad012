"""Butterfly kernels for transform lengths 11 and 13.

Each kernel reads ``length`` elements of ``data`` starting at ``offset``
with spacing ``stride``, multiplies element ``n`` by the twiddle factor
with index ``twiddle_start + n * twiddle_increment`` and replaces the
elements by their discrete Fourier transform with kernel
``exp(+2*pi*i*k*n/length)``, in natural order.
"""


def _loader(phasors, data, positions, twiddle_start, twiddle_increment):
    multiply = phasors.multiply

    def load(n):
        return multiply(data[positions[n]], twiddle_start + n * twiddle_increment)

    return load


def butterfly_11(phasors, data, offset, stride, twiddle_start, twiddle_increment):
    """Length-11 transform in place."""
    pos = range(offset, offset + 11 * stride, stride)
    load = _loader(phasors, data, pos, twiddle_start, twiddle_increment)

    r11 = load(10)
    s1 = load(1)
    r13 = s1 - r11
    r22 = r11 + s1

    s1, s2, s3, s4, s5, s6, s7, s8 = (load(n) for n in range(2, 10))
    r17 = s4 - s5
    s9 = s4 + s5
    r16 = s3 - s6
    s10 = s3 + s6
    r15 = s2 - s7
    s11 = s2 + s7
    r14 = s1 - s8
    s12 = s1 + s8
    r30 = s10 - s9
    r31 = s11 - s9
    r36 = s9 - s12
    r32 = s12 - s11
    r34 = s9 - r22
    r29 = r22 + s9 + s10 + s11 + s12
    r33 = r22 - s10

    r68 = 0.90180781188778253033 * r32
    r55 = r33 - r32
    r69 = 0.5971755722185702045 * r33
    s1 = -0.042314838273285140444 * r55
    r89 = r68 - s1
    r90 = r69 + s1

    s1 = load(0)
    s2 = -0.51541501300188642553 * r30
    s3 = r30 - r31
    s4 = 0.55486073394528506406 * r31
    s5 = 0.94125353283118116886 * r36
    s6 = r36 - r34
    s7 = -0.85949297361449738989 * r34
    s8 = r29 + s1
    s9 = -1.1 * r29
    s10 = -0.89893869455789602842 * s3
    s11 = -0.47310017472860128509 * s6
    data[pos[0]] = s8
    s12 = s8 + s9
    s13 = s2 + s10
    s14 = s4 - s10
    s15 = s5 - s11
    s16 = s7 + s11
    r105 = s13 + s14 + s15 + s16 - s12
    r104 = r89 + s12 + s15
    r103 = s12 + s14 - r89
    r101 = r90 + s12 + s16
    r102 = s12 + s13 - r90

    s1 = r16 - r17
    s2 = r15 - r17
    s3 = r17 + r14
    s4 = r15 + r14
    s5 = r17 - r13
    s6 = r13 + r17 + r16 + r15 - r14
    s7 = r16 - r13
    s8 = 0.492980128140842333j * s1
    s9 = -s1 - s2
    s10 = 2.1583616978496189882j * s2
    s11 = 0.95729268466927362052j * s3
    s12 = -0.70808888503950303466j * s4
    s13 = s3 + s5
    s14 = 1.2162009452834415049j * s5
    s15 = 0.33166247903553998491j * s6
    s16 = s4 + s7
    s17 = 0.2340718675266744486j * s7
    s18 = 0.86713730126545034466j * s9
    s19 = -0.58313551154466560886j * s13
    s20 = -0.65815896284539274746j * s16
    s21 = s8 + s18
    s22 = s10 + s18
    s23 = s11 + s19
    s24 = s14 + s19
    s25 = s12 - s20
    s26 = s17 + s20
    r100 = s15 + s21 + s22 + s23 + s24
    r98 = s22 + s25 - s15
    r97 = s15 + s25 - s23
    s27 = s15 + s26 - s21
    r96 = s15 - s24 - s26
    data[pos[7]] = r102 - s27
    data[pos[4]] = r102 + s27

    data[pos[10]] = r101 - r96
    data[pos[1]] = r101 + r96
    data[pos[2]] = r104 - r97
    data[pos[9]] = r104 + r97
    data[pos[3]] = r103 - r98
    data[pos[8]] = r103 + r98
    data[pos[6]] = -r105 - r100
    data[pos[5]] = r100 - r105


def butterfly_13(phasors, data, offset, stride, twiddle_start, twiddle_increment):
    """Length-13 transform in place."""
    pos = range(offset, offset + 13 * stride, stride)
    load = _loader(phasors, data, pos, twiddle_start, twiddle_increment)

    r13 = load(12)
    s1 = load(1)
    r15 = s1 - r13
    r26 = r13 + s1

    s1 = load(5)
    s2 = load(8)
    r19 = s1 - s2
    s3 = s1 + s2
    r35 = s3 - r26
    r39 = r26 + s3

    s1, s2, s3, s4, s5, s6, s7, s8 = (load(n) for n in (2, 3, 4, 6, 7, 9, 10, 11))
    r20 = s4 - s5
    s9 = s4 + s5
    r18 = s3 - s6
    s10 = s3 + s6
    r17 = s2 - s7
    s11 = s2 + s7
    r16 = s1 - s8
    s12 = s1 + s8
    r34 = s9 - s10
    s13 = s9 + s10
    r37 = s11 - s12
    s14 = s11 + s12
    r51 = s14 - s13
    r55 = s13 - r39
    r49 = r39 + s13 + s14
    r52 = r39 - s14

    r90 = -0.42763404682657276126 * r52

    s1 = load(0)
    s2 = -0.15180597207438773197 * r51
    s3 = -0.57944001890096049323 * r55
    s4 = r49 + s1
    s5 = -1.0833333333333333333 * r49
    data[pos[0]] = s4
    s6 = s4 + s5
    r128 = s6 - s2 - s3
    r127 = s2 + s6 - r90
    r125 = r90 + s3 + s6

    s1 = r34 + r37
    s2 = r35 - r34
    s3 = r35 + r34 - r37
    s4 = -0.53193249842967457518 * s1
    s5 = s2 - s1
    s6 = 1.0407474201500718718 * s2
    s7 = -0.30046260628866577443 * s3
    s8 = -0.52422663952658214901 * s5
    s9 = s4 + s8
    s10 = s6 + s8
    r126 = s9 - s7
    s11 = s7 - s10
    r124 = s7 + s9 + s10
    r136 = s11 - r125
    r138 = r125 + s11

    s1 = r19 - r20
    s2 = r18 + r17
    s3 = r20 - r16
    s4 = r19 + r20 + r16
    s5 = r15 + r17 - r18
    s6 = r15 - r17
    r83 = -0.10417870810104801192j * s1
    s7 = s1 + s2
    s8 = 1.503918122830231381j * s2
    s9 = s1 - s3
    s10 = 2.0875863244363300084j * s3
    s11 = 0.40100212832186721636j * s4
    s12 = s5 - s4
    s13 = 0.74927933062613902637j * s5
    s14 = s6 - s2
    s15 = -s3 - s6
    s16 = -1.5596006223820445613j * s6
    r98 = 0.42380699395323743523j * s7
    s17 = 0.73058834417912600679j * s9
    s18 = 0.57514072947400312137j * s12
    s19 = s9 - s14
    s20 = 1.0211729150707586474j * s14
    s21 = -0.1598612076528611922j * s15
    s22 = s8 + r98
    r118 = s11 + s18
    s23 = s13 - s18
    s24 = -0.087981928766792081008j * s19
    r105 = s10 - s21
    s25 = s16 + s21
    r115 = s17 - s24
    s26 = s20 + s24
    s27 = s22 + s26
    s28 = s25 + s26
    r133 = s27 - s23
    s29 = s23 - s28
    r130 = s23 + s27 + s28
    data[pos[12]] = r138 - s29
    data[pos[1]] = r138 + s29

    s1 = r126 - r127
    r140 = r127 + r126
    data[pos[10]] = -r130 - s1
    data[pos[3]] = r130 - s1

    s1 = r83 - r98
    s2 = r115 + s1
    s3 = r105 + r115
    r134 = s2 - r118
    s4 = s3 - r118
    r131 = r118 + s2 + s3
    data[pos[2]] = r140 - s4
    data[pos[11]] = r140 + s4

    s1 = r124 - r128
    r141 = r128 + r124
    data[pos[7]] = -r131 - s1
    data[pos[6]] = r131 - s1

    data[pos[9]] = r141 - r133
    data[pos[4]] = r133 + r141
    data[pos[5]] = -r136 - r134
    data[pos[8]] = r134 - r136