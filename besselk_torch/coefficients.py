"""
Coefficient tables for the K0 / K1 kernels.

Small argument (x <= 1), a = x^2/4:
    K0(x) = -log(x) * I0(x) + P(x^2),          I0(x) = 1 + a*(Y + a*R(a))
    K1(x) = 1/x + log(x) * I1(x) + x * P(x^2),  I1(x) = x/2 * (1 + a/2 + a^2*(Y + a*R(a)))
  P are the Taylor coefficients of K0 + log(x) I0 and (K1 - log(x) I1 - 1/x)/x,
  R the tails of the I0 / I1 series.

Large argument (x > 1):
    x^{1/2} e^x K(x) ~ P(1/x) / Q(1/x)
  (Holoborodko, "Rational approximations for the modified Bessel function of the
  second kind - K0(x)/K1(x) for computations with double precision").

All tables are low-to-high degree.
"""

# --- K0, x <= 1 ---
K0_SMALL_Y = 1.0
K0_SMALL_R = (
    2.5000000000000000e-01, 2.7777777777777776e-02,
    1.7361111111111110e-03, 6.9444444444444444e-05,
    1.9290123456790124e-06, 3.9367598891408418e-08,
    6.1511873267825652e-10, 7.5940584281266239e-12,
    7.5940584281266234e-14,
)
K0_SMALL_P = (
    1.1593151565841242e-01, 2.7898287891460311e-01,
    2.5248929932162694e-02, 8.4603509070822292e-04,
    1.4914719299260428e-05, 1.6271056104815986e-07,
    1.2084261650077971e-09, 6.5086978387473547e-12,
    2.6597846806398083e-14, 8.5310901319585924e-17,
    2.2051951177915762e-19,
)

# --- K1, x <= 1 ---
K1_SMALL_Y = 8.3333333333333329e-02
K1_SMALL_R = (
    6.9444444444444441e-03, 3.4722222222222224e-04,
    1.1574074074074074e-05, 2.7557319223985888e-07,
    4.9209498614260522e-09, 6.8346525853139614e-11,
    7.5940584281266231e-13, 6.9036894801151122e-15,
)
K1_SMALL_P = (
    -3.0796575782920621e-01, -8.5370719728650776e-02,
    -4.6421827664715597e-03, -1.1253607036630565e-04,
    -1.5592887702038205e-06, -1.4030163700386776e-08,
    -8.8718962192938534e-11, -4.1617958191203950e-13,
    -1.5066271898317757e-15, -4.3379676507812249e-18,
    -1.0173247611453295e-20,
)

# --- K0, x > 1 ---
# K0: x^{1/2} e^x K0 ~ P21(1/x)/Q2(1/x)
K0_LARGE_P = (
    1.0694678222191263215918328e-01,  9.0753360415683846760792445e-01,
    1.7215172959695072045669045e+00, -1.7172089076875257095489749e-01,
    7.3154750356991229825958019e-02, -5.4975286232097852780866385e-02,
    5.7217703802970844746230694e-02, -7.2884177844363453190380429e-02,
    1.0443967655783544973080767e-01, -1.5741597553317349976818516e-01,
    2.3582486699296814538802637e-01, -3.3484166783257765115562496e-01,
    4.3328524890855568555069622e-01, -4.9470375304462431447923425e-01,
    4.8474122247422388055091847e-01, -3.9725799556374477699937953e-01,
    2.6507653322930767914034592e-01, -1.3951265948137254924254912e-01,
    5.5500667358490463548729700e-02, -1.5636955694760495736676521e-02,
    2.7741514506299244078981715e-03, -2.3261089001545715929104236e-04,
)
K0_LARGE_Q = (8.5331186362410449871043129e-02, 7.3477344946182065340442326e-01, 1.4594189037511445958046540e+00)

# --- K1, x > 1 ---
# K1: x^{1/2} e^x K1 ~ P22(1/x)/Q2(1/x)
K1_LARGE_P = (
    1.0234817795732426171122752e-01,  9.4576473594736724815742878e-01,
    2.1876721356881381470401990e+00,  6.0143447861316538915034873e-01,
   -1.3961391456741388991743381e-01,  8.8229427272346799004782764e-02,
   -8.5494054051512748665954180e-02,  1.0617946033429943924055318e-01,
   -1.5284482951051872048173726e-01,  2.3707700686462639842005570e-01,
   -3.7345723872158017497895685e-01,  5.6874783855986054797640277e-01,
   -8.0418742944483208700659463e-01,  1.0215105768084562101457969e+00,
   -1.1342221242815914077805587e+00,  1.0746932686976675016706662e+00,
   -8.4904532475797772009120500e-01,  5.4542251056566299656460363e-01,
   -2.7630896752209862007904214e-01,  1.0585982409547307546052147e-01,
   -2.8751691985417886721803220e-02,  4.9233441525877381700355793e-03,
   -3.9900679319457222207987456e-04,
)
K1_LARGE_Q = (8.1662031018453173425764707e-02, 7.2398781933228355889996920e-01, 1.4835841581744134589980018e+00)

# binary32 only needs the leading Taylor terms below x = 1
K0_SMALL_R_F32 = K0_SMALL_R[:5]
K0_SMALL_P_F32 = K0_SMALL_P[:7]
K1_SMALL_R_F32 = K1_SMALL_R[:4]
K1_SMALL_P_F32 = K1_SMALL_P[:7]
