"""
Correction polynomials of the uniform (Debye) asymptotic expansion

    K_nu(nu*z) ~ sqrt(pi/(2 nu)) exp(-nu*eta) / (1+z^2)^(1/4) * sum_k (-1)^k U_k(p) / nu^k

with p = 1/sqrt(1+z^2)  (DLMF 10.41.4, A&S 9.7.8).

U_0 = 1 and
    U_{k+1}(p) = 1/2 p^2 (1-p^2) U_k'(p) + 1/8 int_0^p (1-5t^2) U_k(t) dt

U_k(p) only carries the powers p^k, p^(k+2), ..., p^(3k), so each entry stores
V_k with U_k(p) = p^k * V_k(p^2); coefficients low-to-high degree in p^2.
"""

U_POLYNOMIALS = (
    # U_0
    (
        1.0000000000000000e+00,
    ),
    # U_1
    (
        1.2500000000000000e-01,
        -2.0833333333333334e-01,
    ),
    # U_2
    (
        7.0312500000000000e-02,
        -4.0104166666666669e-01,
        3.3420138888888890e-01,
    ),
    # U_3
    (
        7.3242187500000000e-02,
        -8.9121093750000002e-01,
        1.8464626736111112e+00,
        -1.0258125964506173e+00,
    ),
    # U_4
    (
        1.1215209960937500e-01,
        -2.3640869140624998e+00,
        8.7891235351562500e+00,
        -1.1207002616222995e+01,
        4.6695844234262474e+00,
    ),
    # U_5
    (
        2.2710800170898438e-01,
        -7.3687943594796312e+00,
        4.2534998745388449e+01,
        -9.1818241543240035e+01,
        8.4636217674600744e+01,
        -2.8212072558200244e+01,
    ),
    # U_6
    (
        5.7250142097473145e-01,
        -2.6491430486951554e+01,
        2.1819051174421156e+02,
        -6.9957962737613252e+02,
        1.0599904525279999e+03,
        -7.6525246814118168e+02,
        2.1257013003921710e+02,
    ),
    # U_7
    (
        1.7277275025844574e+00,
        -1.0809091978839464e+02,
        1.2009029132163523e+03,
        -5.3056469786134030e+03,
        1.1655393336864534e+04,
        -1.3586550006434138e+04,
        8.0617221817373093e+03,
        -1.9194576623184068e+03,
    ),
    # U_8
    (
        6.0740420012734830e+00,
        -4.9391530477308800e+02,
        7.1095143024893632e+03,
        -4.1192654968897550e+04,
        1.2220046498301746e+05,
        -2.0340017728041555e+05,
        1.9254700123253156e+05,
        -9.6980598388637518e+04,
        2.0204291330966149e+04,
    ),
    # U_9
    (
        2.4380529699556064e+01,
        -2.4998304818112092e+03,
        4.5218768981362729e+04,
        -3.3164517248456355e+05,
        1.2683652733216248e+06,
        -2.8135632265865337e+06,
        3.7632712976564043e+06,
        -2.9980159185381071e+06,
        1.3117636146629774e+06,
        -2.4291918790055133e+05,
    ),
    # U_10
    (
        1.1001714026924674e+02,
        -1.3886089753717039e+04,
        3.0818640461266239e+05,
        -2.7856181280864547e+06,
        1.3288767166421819e+07,
        -3.7567176660763346e+07,
        6.6344512274729013e+07,
        -7.4105148211532682e+07,
        5.0952602492664650e+07,
        -1.9706819118432231e+07,
        3.2844698530720375e+06,
    ),
    # U_11
    (
        5.5133589612202059e+02,
        -8.4005433603024081e+04,
        2.2437681779224491e+06,
        -2.4474062725738730e+07,
        1.4206290779753309e+08,
        -4.9588978427503026e+08,
        1.1068428168230140e+09,
        -1.6210805521083374e+09,
        1.5535968995705805e+09,
        -9.3946235968157852e+08,
        3.2557307418576586e+08,
        -4.9329253664509952e+07,
    ),
    # U_12
    (
        3.0380905109223845e+03,
        -5.4984232757228857e+05,
        1.7395107553978160e+07,
        -2.2510566188941526e+08,
        1.5592798648792574e+09,
        -6.5632937926192846e+09,
        1.7954213731155594e+10,
        -3.3026599749800724e+10,
        4.1280185579753983e+10,
        -3.4632043388158783e+10,
        1.8688207509295830e+10,
        -5.8664814920518484e+09,
        8.1478909611831200e+08,
    ),
    # U_13
    (
        1.8257755474293179e+04,
        -3.8718334425726123e+06,
        1.4315787671888894e+08,
        -2.1671649832237949e+09,
        1.7634730606834969e+10,
        -8.7867072178023270e+10,
        2.8790064990615051e+11,
        -6.4536486924537646e+11,
        1.0081581068653823e+12,
        -1.0983751560812235e+12,
        8.1921866954857751e+11,
        -3.9909617522446655e+11,
        1.1449823773202583e+11,
        -1.4679261247695614e+10,
    ),
    # U_14
    (
        1.1883842625678328e+05,
        -2.9188388122220814e+07,
        1.2470092935127101e+09,
        -2.1822927757529224e+10,
        2.0591450323241003e+11,
        -1.1965528801961816e+12,
        4.6127257808491309e+12,
        -1.2320491305598285e+13,
        2.3348364044581844e+13,
        -3.1667088584785164e+13,
        3.0565125519935328e+13,
        -2.0516899410934441e+13,
        9.1093411852399004e+12,
        -2.4062979000285044e+12,
        2.8646403571767896e+11,
    ),
    # U_15
    (
        8.3285930401628942e+05,
        -2.3455796352225155e+08,
        1.1465754899448236e+10,
        -2.2961937296824646e+11,
        2.4850009280340859e+12,
        -1.6634824724892480e+13,
        7.4373122908679125e+13,
        -2.3260483118893988e+14,
        5.2305488257844462e+14,
        -8.5746103298289512e+14,
        1.0269551960827628e+15,
        -8.8949693988102662e+14,
        5.4273966498765975e+14,
        -2.2134963870252522e+14,
        5.4177510755106055e+13,
        -6.0197234172340029e+12,
    ),
    # U_16
    (
        6.2529514934347970e+06,
        -2.0016469281917768e+09,
        1.1099740513917900e+11,
        -2.5215584749128545e+12,
        3.1007436472896469e+13,
        -2.3665253045164928e+14,
        1.2126758042503472e+15,
        -4.3793258383640140e+15,
        1.1486706978449750e+16,
        -2.2268225133911148e+16,
        3.2138275268586248e+16,
        -3.4447226006485152e+16,
        2.7054711306197088e+16,
        -1.5129826322457682e+16,
        5.7057821590236710e+15,
        -1.3010127235496995e+15,
        1.3552215870309362e+14,
    ),
    # U_17
    (
        5.0069589531988926e+07,
        -1.8078220384658070e+10,
        1.1287091454108743e+12,
        -2.8863837631414758e+13,
        4.0004445704303631e+14,
        -3.4503855118462730e+15,
        2.0064271476309528e+16,
        -8.2709456515850608e+16,
        2.4960365126160416e+17,
        -5.6263178807463610e+17,
        9.5753350981691418e+17,
        -1.2336116931960696e+18,
        1.1961991142756311e+18,
        -8.5925779803175488e+17,
        4.4347954614171910e+17,
        -1.5552983504313901e+17,
        3.3192764720355220e+16,
        -3.2541926196426675e+15,
    ),
    # U_18
    (
        4.2593921650476694e+08,
        -1.7228323871735056e+11,
        1.2030115826419195e+13,
        -3.4396530474307594e+14,
        5.3351069787088400e+15,
        -5.1605093193485232e+16,
        3.3766762497906086e+17,
        -1.5736434765189591e+18,
        5.4028948767159788e+18,
        -1.3970803516443372e+19,
        2.7572829816505192e+19,
        -4.1788614446568391e+19,
        4.8599427293248356e+19,
        -4.3015557038314447e+19,
        2.8465212251676574e+19,
        -1.3639420410571592e+19,
        4.4702009640123100e+18,
        -8.9661142152704614e+17,
        8.3019576067319072e+16,
    ),
    # U_19
    (
        3.8362551802304339e+09,
        -1.7277040123530002e+12,
        1.3412416915180642e+14,
        -4.2619355104268980e+15,
        7.3516636109309712e+16,
        -7.9216511193238336e+17,
        5.7898876676646523e+18,
        -3.0255665989903708e+19,
        1.1707490535797252e+20,
        -3.4346213997684156e+20,
        7.7567049534611377e+20,
        -1.3602037772849942e+21,
        1.8571089321463450e+21,
        -1.9677247077053125e+21,
        1.6016898573693598e+21,
        -9.8244384276898592e+20,
        4.3927922008887126e+20,
        -1.3512175034359960e+20,
        2.5563802960529232e+19,
        -2.2424388561867740e+18,
    ),
    # U_20
    (
        3.6468400807065567e+10,
        -1.8187262038511043e+13,
        1.5613123930484675e+15,
        -5.4840336038832896e+16,
        1.0461721131134345e+18,
        -1.2483700995047236e+19,
        1.0126774169536591e+20,
        -5.8917941350694945e+20,
        2.5489611146649702e+21,
        -8.4059158171083468e+21,
        2.1487414815055883e+22,
        -4.3025343034823794e+22,
        6.7836616429518832e+22,
        -8.4232227500843214e+22,
        8.1943310054351295e+22,
        -6.1732063028844146e+22,
        3.5284358439034096e+22,
        -1.4787743528433616e+22,
        4.2852960828294934e+21,
        -7.6719439367290041e+20,
        6.3932866139408343e+19,
    ),
)

# binary32 never needs more than the first eleven terms above its cutoffs
U_POLYNOMIALS_F32 = U_POLYNOMIALS[:11]
