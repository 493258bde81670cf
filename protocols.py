"""Step-by-step preparation protocols for the filling presets.

Every preset in `presets.FILLING_PRESETS` has a protocol under the same key.
The four classic fillings carry the full timed method; the four named-chef
fillings carry a short one.

Exports
-------
PREPARATION_PROTOCOLS
get_preparation_protocol
"""

from types import (
    MappingProxyType,
)
from typing import (
    Final,
    Mapping,
)

from models.protocol import (
    PrePreparation,
    PreparationProtocol,
    ProtocolAction as Action,
    ProtocolStep as Step,
    Troubleshooting,
)

_PROTOCOLS: Final[tuple[PreparationProtocol, ...]] = (
    PreparationProtocol(
        key="classic-sour-cream",
        name="كريمة حامضة كلاسيكية",
        total_time="25 دقيقة (+ 6-8 ساعات تصفية مسبقة)",
        difficulty="سهل",
        yield_text="~1100 جرام، يكفي لـ8-10 طبقات 24سم",
        pre_preparation=PrePreparation(
            title="التحضير المسبق (ليلة سابقة - إلزامي)",
            duration="6-8 ساعات",
            critical=True,
            tasks=(
                Action(
                    action="تصفية الكريمة الحامضة (Sour Cream)",
                    time="قبل 6-8 ساعات",
                    detail=(
                        "ضع قماش موسلين (أو شاش طبي 4 طبقات) في مصفاة",
                        "ضع المصفاة فوق وعاء عميق",
                        "اسكب 800 جرام سور كريم في القماش",
                        "غطِّ بغلاف بلاستيكي",
                        "ضعها في الثلاجة",
                    ),
                    temperature="4°C طوال فترة التصفية",
                    duration="6-8 ساعات (أو ليلة كاملة)",
                    checkpoint="اختبار الملعقة: يجب أن تقف الملعقة في السور كريم بدون أن تسقط",
                ),
            ),
        ),
        steps=(
            Step(
                number=1,
                name="التحضير البارد (Cold Setup)",
                duration="10 دقائق",
                temperature="المعدات -5°C، المكونات 4°C، الغرفة 18-20°C",
                actions=(
                    Action(
                        action="تبريد الأدوات",
                        time="0:00",
                        detail=(
                            "ضع وعاء الخلط المعدني (ستانلس ستيل 3-4 لتر) في الفريزر",
                            "ضع مضرب الخفق السلكي (Whisk) في الفريزر",
                        ),
                        duration="10 دقائق بالضبط",
                        checkpoint="لمس الوعاء = بارد جداً يكاد يلتصق بالأصابع",
                    ),
                    Action(
                        action="إخراج المكونات",
                        time="0:00",
                        detail=(
                            "أخرج السور كريم المصفاة من الثلاجة: يجب 4-6°C",
                            "أخرج الكريمة السائلة (Heavy Cream): يجب 2-4°C",
                        ),
                        checkpoint="ميزان الحرارة يقرأ 2-6°C للمكونات",
                        warnings=("إذا كانت المكونات >10°C: برّدها 15 دقيقة إضافية",),
                    ),
                    Action(
                        action="نخل السكر البودرة",
                        time="8:00",
                        detail=(
                            "ضع 120 جرام سكر بودرة في منخل ناعم (200 mesh)",
                            "انخل مرتين فوق ورق زبدة",
                        ),
                        checkpoint="السكر ناعم جداً بدون أي كتل",
                    ),
                    Action(
                        action="تحضير خلاصة الفانيليا",
                        time="9:00",
                        detail=("قس 5 مل خلاصة فانيليا نقية",),
                        warnings=("لا تضع الفانيليا الآن - تُضاف في النهاية فقط",),
                    ),
                ),
            ),
            Step(
                number=2,
                name="خفق الكريمة السائلة (المرحلة الأولى)",
                duration="6-8 دقائق",
                temperature="البداية 2-4°C، أثناء الخفق 6-8°C، النهاية 8-10°C",
                actions=(
                    Action(
                        action="البدء البطيء",
                        time="0:00 - 0:30",
                        rpm=150,
                        detail=(
                            "اسكب 400 جرام كريمة خفق ثقيلة 35% في الوعاء المبرد",
                            "شغّل الخلاط على أقل سرعة 30 ثانية",
                        ),
                        warnings=("لا تبدأ بسرعة عالية - سترش الكريمة خارج الوعاء",),
                    ),
                    Action(
                        action="رفع السرعة التدريجي",
                        time="0:30 - 2:00",
                        rpm=200,
                        detail=("ارفع السرعة للمتوسطة", "راقب الكريمة تبدأ بالتثخن"),
                        checkpoint="درجة الحرارة: 6-8°C",
                        warnings=(
                            "إذا تجاوزت 10°C: أوقف الخلاط، ضع الوعاء في حمام ثلجي 2-3 دقائق",
                        ),
                    ),
                    Action(
                        action="إضافة السكر على 3 دفعات",
                        time="2:00 - 2:30",
                        rpm=200,
                        detail=(
                            "أضف 40 جرام سكر بودرة واخفق 10 ثوانٍ",
                            "أضف 40 جرام أخرى واخفق 10 ثوانٍ",
                            "أضف آخر 40 جرام واخفق 10 ثوانٍ",
                        ),
                        checkpoint="كل السكر الآن مدمج",
                    ),
                    Action(
                        action="الخفق النهائي للكريمة",
                        time="2:30 - 6:00",
                        rpm=280,
                        detail=(
                            "ارفع السرعة للعالية",
                            "بعد الدقيقة 4: اختبر القمة كل 30 ثانية",
                            "توقف عند Medium Peak: القمة تقف ثم تنحني 45° ببطء",
                        ),
                        checkpoint="سطح حريري لامع، الحرارة 8-10°C",
                        warnings=(
                            "لا تترك الخلاط يعمل دون مراقبة",
                            "الفرق بين Medium Peak والخفق الزائد هو 20-30 ثانية فقط",
                        ),
                    ),
                ),
            ),
            Step(
                number=3,
                name="دمج الكريمة الحامضة (المرحلة الثانية)",
                duration="3-4 دقائق",
                temperature="الخليط 8-10°C، السور كريم 4-6°C",
                actions=(
                    Action(
                        action="دمج السور كريم على 3 دفعات",
                        time="0:00 - 3:00",
                        rpm=100,
                        detail=(
                            "أضف حوالي 250 جرام سور كريم واخفق 30 ثانية",
                            "أضف 250 جرام أخرى واخفق 30 ثانية",
                            "أضف الباقي (200-250 جرام) على سرعة 120 حتى التجانس",
                        ),
                        checkpoint="لون موحد تماماً، بدون أي خطوط",
                        warnings=("لا ترفع السرعة - ستفقد الهواء المخفوق",),
                    ),
                    Action(
                        action="إضافة الفانيليا",
                        time="3:00",
                        rpm=100,
                        detail=("أضف 5 مل خلاصة فانيليا", "اخفق 15 ثانية فقط"),
                        warnings=("لا تخفق أكثر من 15 ثانية بعد الفانيليا",),
                    ),
                    Action(
                        action="اختبار القوام النهائي",
                        detail=(
                            "ارفع ملعقة: تسقط ببطء وتترك أثراً 2-3 ثواني",
                            "ملعقة في كوب 5 دقائق: لا انفصال سوائل في القاع",
                        ),
                        temperature="8-10°C",
                        warnings=(
                            "إذا تجاوزت 12°C: ضع الوعاء في حمام ثلجي 3 دقائق مع التحريك برفق",
                        ),
                    ),
                ),
            ),
            Step(
                number=4,
                name="التبريد والتخزين",
                duration="30 دقيقة - ساعتين",
                temperature="التخزين 2-4°C، الاستخدام 8-10°C",
                actions=(
                    Action(
                        action="التغطية الصحيحة",
                        detail=(
                            "انقل الحشوة لوعاء نظيف محكم",
                            "ضع غلافاً بلاستيكياً مباشرة على سطح الحشوة",
                        ),
                        warnings=("الغلاف يجب أن يلامس السطح - وإلا ستتكون قشرة جافة",),
                    ),
                    Action(
                        action="التبريد",
                        detail=("ضع الوعاء على الرف الأوسط في الثلاجة",),
                        duration="30 دقيقة كحد أدنى",
                        checkpoint="بعد 30 دقيقة: قوام أثخن قليلاً لكن قابل للفرد",
                        warnings=("لا تترك أكثر من ساعتين قبل الاستخدام - قد تتصلب جداً",),
                    ),
                    Action(
                        action="قبل الاستخدام",
                        detail=("أزل الغلاف", "حرّك برفق بملعقة خشبية"),
                        duration="20 ثانية تحريك يدوي",
                        checkpoint="قوام ناعم كريمي قابل للفرد",
                    ),
                ),
            ),
        ),
        troubleshooting=(
            Troubleshooting(
                problem="الحشوة سائلة جداً (Runny)",
                causes=(
                    "السور كريم لم تُصفى كفاية",
                    "الكريمة السائلة لم تُخفق لـMedium Peak",
                ),
                solutions=(
                    "أعد التصفية عبر قماش موسلين في الثلاجة 2-3 ساعات",
                    "اطوِ 100 جم كريمة مخفوقة لـStiff Peak",
                ),
            ),
            Troubleshooting(
                problem="تحبب (Curdled/Grainy)",
                causes=(
                    "خفق زائد للكريمة السائلة (>Medium Peak)",
                    "إضافة السور كريم بسرعة كبيرة",
                ),
                solutions=(
                    "أضف 50-75 مل كريمة سائلة باردة (2°C)، اخفق يدوياً 10 ثوانٍ ثم 20 ثانية على 100 RPM",
                ),
            ),
            Troubleshooting(
                problem="انفصال (Separation) بعد ساعات",
                causes=(
                    "السور كريم لم تُصفى أصلاً",
                    "تخزين في درجة حرارة مرتفعة (>6°C)",
                ),
                solutions=(
                    "اسكب السوائل المنفصلة واخفق 1-2 دقيقة على 200 RPM",
                    "أذب ورقة جيلاتين (2جم) وبرّدها لـ35°C ثم اخلطها بالخفق السريع",
                ),
            ),
            Troubleshooting(
                problem="صلبة جداً (Too Stiff)",
                causes=("خفق زائد", "سور كريم كثيفة جداً"),
                solutions=(
                    "اطوِ 2-3 ملاعق كبيرة كريمة سائلة",
                    "اترك الحشوة 10-15 دقيقة في حرارة الغرفة وقلّب برفق",
                ),
            ),
        ),
    ),
    PreparationProtocol(
        key="dulce-caramel",
        name="دولسي دي ليتشي كراميل",
        total_time="12 دقيقة",
        difficulty="سهل",
        yield_text="~920 جرام",
        pre_preparation=PrePreparation(
            title="تحضير السور كريم المصفاة",
            duration="6-8 ساعات",
            tasks=(
                Action(
                    action="تصفية 600 جم سور كريم",
                    checkpoint="الوزن بعد التصفية 500-525 جرام",
                ),
            ),
        ),
        steps=(
            Step(
                number=1,
                name="تجهيز الدولسي",
                duration="5 دقائق",
                actions=(
                    Action(
                        action="فحص درجة حرارة الدولسي",
                        time="0:00",
                        detail=("يجب 18-20°C", "إذا كان بارداً: سخّن في حمام مائي 40°C"),
                        checkpoint="قوام: ينساب ببطء من الملعقة",
                    ),
                    Action(
                        action="خفق الدولسي منفرداً",
                        time="2:00",
                        rpm=180,
                        detail=("ضع 360جم دولسي في وعاء", "اخفق بمضرب Paddle لمدة 3 دقائق"),
                    ),
                ),
            ),
            Step(
                number=2,
                name="دمج السور كريم",
                duration="4 دقائق",
                actions=(
                    Action(
                        action="إضافة السور كريم على 3 دفعات",
                        rpm=120,
                        detail=(
                            "دفعة 1: 175جم + خفق 30 ثانية",
                            "دفعة 2: 175جم + خفق 30 ثانية",
                            "دفعة 3: الباقي + خفق حتى التجانس",
                        ),
                        checkpoint="لون بيج كراميلي موحد بدون خطوط بيضاء",
                        warnings=("لا ترفع السرعة - سيسبب انفصال",),
                    ),
                ),
            ),
            Step(
                number=3,
                name="الإضافات النهائية",
                duration="2 دقيقة",
                actions=(
                    Action(
                        action="إضافة ملح + ليمون",
                        detail=("2جم ملح بحري", "5مل عصير ليمون", "اخفق 15 ثانية"),
                    ),
                ),
            ),
        ),
        troubleshooting=(
            Troubleshooting(
                problem="كتل دولسي صلبة",
                causes=("دولسي بارد",),
                solutions=("صفِّ، سخّن الكتل في حمام مائي 40°C، أعد الدمج",),
            ),
        ),
    ),
    PreparationProtocol(
        key="cream-cheese-honey",
        name="جبن كريمي بالعسل والجيلاتين",
        total_time="20 دقيقة + 4 ساعات تماسك",
        difficulty="متقدم",
        yield_text="~1020 جرام",
        steps=(
            Step(
                number=1,
                name="نقع وإذابة الجيلاتين (Critical Step)",
                duration="10 دقائق",
                temperature="النقع 4°C، الإذابة 50-55°C، الاستخدام 35°C",
                note="هذه أهم خطوة - خطأ هنا = فشل كامل",
                actions=(
                    Action(
                        action="نقع الجيلاتين",
                        time="0:00",
                        detail=(
                            "ضع 20مل ماء مثلج (4°C) في كوب صغير",
                            "أضف 4 ورقات جيلاتين (Bloom 200)",
                            "اتركها 5 دقائق بالضبط",
                        ),
                        checkpoint="الجيلاتين يصبح مطاطياً طرياً",
                        warnings=("لا تستخدم ماء دافئ - سيذوب بشكل غير متحكم فيه",),
                    ),
                    Action(
                        action="عصر الجيلاتين",
                        time="5:00",
                        detail=("اعصر الجيلاتين بيدك لإزالة الماء الزائد",),
                        checkpoint="الوزن ~6 جرام بعد العصر",
                    ),
                    Action(
                        action="إذابة الجيلاتين (نقطة حرجة)",
                        time="6:00",
                        detail=("ضع الجيلاتين المعصور في قدر صغير", "سخّن على نار هادئة جداً"),
                        temperature="50-55°C",
                        duration="2-3 دقائق",
                        warnings=("لا تتجاوز 60°C أبداً!",),
                    ),
                    Action(
                        action="تبريد الجيلاتين (نقطة حرجة)",
                        time="9:00",
                        detail=("أزل القدر من النار", "اتركه يبرد حتى 35°C بالضبط"),
                        temperature="33-37°C",
                        duration="3-4 دقائق",
                        checkpoint="ميزان الحرارة يقرأ 35°C، سائل تماماً",
                        warnings=("إذا تصلب: سخّن مرة أخرى لـ50°C ثم برّد لـ35°C",),
                    ),
                ),
            ),
            Step(
                number=2,
                name="تجهيز الأجبان",
                duration="15 دقيقة قبل الاستخدام",
                temperature="18-20°C",
                actions=(
                    Action(
                        action="إخراج الأجبان من الثلاجة",
                        detail=(
                            "400جم جبن كريمي (Philadelphia)",
                            "200جم ماسكربوني",
                            "اتركها 15-20 دقيقة في حرارة الغرفة",
                        ),
                        checkpoint="قس الحرارة: يجب 18-20°C",
                        warnings=("إذا كانت باردة (<15°C): سيتكتل الجيلاتين فوراً",),
                    ),
                ),
            ),
            Step(
                number=3,
                name="خفق الجبن والماسكربوني",
                duration="3 دقائق",
                temperature="18-20°C",
                actions=(
                    Action(
                        action="خفق الأجبان",
                        rpm=100,
                        detail=(
                            "ضع الجبن الكريمي والماسكربوني في وعاء الخلاط",
                            "اخفق بمضرب Paddle على سرعة منخفضة",
                        ),
                        duration="90 ثانية",
                        checkpoint="توقف، اكشط الجوانب بسباتولا، اخفق 30 ثانية إضافية",
                    ),
                    Action(
                        action="إضافة العسل والسكر",
                        detail=("أضف 80جم عسل طبيعي (22°C)", "أضف 60جم سكر بودرة", "اخفق 60 ثانية"),
                        checkpoint="متجانس تماماً، لون كريمي ذهبي فاتح",
                    ),
                ),
            ),
            Step(
                number=4,
                name="دمج الجيلاتين (الخطوة الحرجة)",
                duration="1 دقيقة",
                temperature="الجيلاتين 35°C، الأجبان 18-20°C",
                actions=(
                    Action(
                        action="فحص حرارة الجيلاتين",
                        time="0:00",
                        detail=("يجب أن يكون 33-37°C", "سائل تماماً"),
                        checkpoint="ميزان الحرارة يقرأ 35°C",
                    ),
                    Action(
                        action="دمج الجيلاتين",
                        time="0:10",
                        rpm=100,
                        detail=(
                            "اسكب الجيلاتين السائل في خط رفيع مستمر والخلاط يعمل",
                            "اخفق 30 ثانية إضافية بعد الإضافة",
                        ),
                        duration="30 ثانية",
                        warnings=("إذا ظهرت كتل جيلاتين: صفِّ فوراً واستبعد الكتل",),
                    ),
                ),
            ),
            Step(
                number=5,
                name="خفق ودمج الكريمة",
                duration="5 دقائق",
                actions=(
                    Action(
                        action="خفق الكريمة السائلة منفصلة",
                        detail=("في وعاء منفصل بارد اخفق 300جم كريمة خفق 35% حتى Soft Peak",),
                        checkpoint="قمة ناعمة تنحني بالكامل",
                    ),
                    Action(
                        action="دمج الكريمة بالطي (Folding)",
                        detail=(
                            "أضف الكريمة المخفوقة على 3 أثلاث",
                            "اطوِ بسباتولا سيليكون من الأسفل للأعلى",
                        ),
                        duration="30-45 ثانية فقط",
                        checkpoint="موس خفيف موحد",
                        warnings=("لا تخفق بالخلاط - ستفقد كل الهواء",),
                    ),
                ),
            ),
            Step(
                number=6,
                name="التبريد والتماسك",
                duration="4 ساعات",
                temperature="4°C",
                actions=(
                    Action(
                        action="نقل وتبريد",
                        detail=(
                            "انقل لوعاء محكم",
                            "غطِّ بغلاف ملامس",
                            "ضع في الثلاجة 4 ساعات كحد أدنى",
                        ),
                        checkpoint="بعد 4 ساعات: قوام موس كثيف، يحتفظ بالشكل",
                    ),
                ),
            ),
        ),
        troubleshooting=(
            Troubleshooting(
                problem="لم يتماسك بعد 4 ساعات",
                causes=("جيلاتين محموم (>60°C)", "جيلاتين قليل", "جيلاتين منتهي الصلاحية"),
                solutions=(
                    "سخّن 50جم من الخليط لـ50°C",
                    "أضف 2-3 ورقات جيلاتين مذابة عند 35°C",
                    "اخلط مع الباقي",
                    "برّد 4 ساعات إضافية",
                ),
            ),
            Troubleshooting(
                problem="صلب جداً (مطاطي)",
                causes=("جيلاتين زائد",),
                solutions=("اخلط مع 100-150جم ماسكربوني طري",),
            ),
        ),
    ),
    PreparationProtocol(
        key="custard-butter",
        name="كاسترد بالزبدة",
        total_time="35 دقيقة + تبريد",
        difficulty="متقدم",
        yield_text="~950 جرام",
        steps=(
            Step(
                number=1,
                name="تحضير خليط الصفار",
                duration="5 دقائق",
                temperature="20°C",
                actions=(
                    Action(
                        action="فصل الصفار",
                        detail=("افصل 6-7 بيضات كبيرة", "خذ الصفار فقط = 150جم"),
                        checkpoint="صفار نقي 100% بدون بياض",
                        warnings=("أي أثر لبياض البيض سيسبب تخثر",),
                    ),
                    Action(
                        action="خفق الصفار والسكر",
                        rpm=0,
                        detail=("أضف 120جم سكر حبيبات للصفار", "اخفق فوراً بخفاقة يدوية"),
                        duration="2-3 دقائق",
                        checkpoint="حجم يزيد 50%، لون أفتح",
                    ),
                    Action(
                        action="إضافة النشا",
                        detail=("انخل 50جم نشا ذرة", "أضفه للصفار واخفق حتى يذوب تماماً"),
                        checkpoint="بدون أي كتل نشا",
                        warnings=("النشا المتكتل سيبقى كتلاً في الكاسترد",),
                    ),
                ),
            ),
            Step(
                number=2,
                name="تسخين الحليب",
                duration="5 دقائق",
                temperature="80-85°C",
                actions=(
                    Action(
                        action="تحضير قرن الفانيليا",
                        detail=("شق قرن الفانيليا بالطول", "اكشط البذور وضعها مع القرن في قدر"),
                    ),
                    Action(
                        action="تسخين الحليب",
                        detail=("أضف 450جم حليب كامل الدسم للقدر", "سخّن على نار متوسطة مع التحريك"),
                        temperature="80-85°C",
                        checkpoint="لا فقاعات غليان - فقط بخار",
                        warnings=("إذا غلى: طعم محروق + تبخر زائد",),
                    ),
                ),
            ),
            Step(
                number=3,
                name="التمبرنج (Tempering) - نقطة حرجة",
                duration="3-4 دقائق",
                temperature="65-70°C",
                actions=(
                    Action(
                        action="تمبرنج الصفار (تدريج الحرارة)",
                        detail=(
                            "خذ ~100مل من الحليب الساخن",
                            "اسكبه بخيط رفيع جداً على الصفار مع الخفق السريع",
                            "استمر بالخفق 30 ثانية",
                        ),
                        warnings=("توقف عن الخفق = تخثر فوري",),
                    ),
                    Action(
                        action="إضافة خليط الصفار للحليب",
                        detail=("اسكب ببطء في قدر الحليب مع التحريك المستمر",),
                        checkpoint="خليط موحد بدون كتل",
                    ),
                ),
            ),
            Step(
                number=4,
                name="الطبخ (أخطر مرحلة)",
                duration="8-10 دقائق",
                temperature="82-85°C",
                note="90°C = تخثر كامل",
                actions=(
                    Action(
                        action="الطبخ مع التحريك المستمر",
                        detail=(
                            "ارجع القدر للنار المتوسطة",
                            'حرّك بخفاقة بشكل "8" مستمر واكشط القاع والجوانب',
                            "راقب ميزان الحرارة كل 30 ثانية",
                        ),
                        temperature="82-85°C",
                        checkpoint="اختبار Nappé: خط الإصبع على ظهر الملعقة يبقى واضحاً",
                        warnings=("لا تتوقف عن التحريك حتى لو رن الهاتف!",),
                    ),
                ),
            ),
            Step(
                number=5,
                name="التصفية وإضافة الزبدة",
                duration="3 دقائق",
                temperature="85°C → 40°C",
                actions=(
                    Action(
                        action="تصفية فورية",
                        detail=(
                            "فور الوصول لـ82-85°C: أزل من النار",
                            "صفِّ فوراً عبر مصفاة شبكية ناعمة",
                        ),
                        checkpoint="كاسترد أملس 100%",
                    ),
                    Action(
                        action="إضافة الزبدة",
                        detail=(
                            "أضف 180جم زبدة طرية (20°C) مقطعة مكعبات",
                            "قلّب بخفاقة حتى تذوب تماماً - لا تخفق",
                        ),
                        temperature="~80°C",
                    ),
                ),
            ),
            Step(
                number=6,
                name="التبريد السريع",
                duration="10-15 دقيقة",
                temperature="85°C → 20°C",
                actions=(
                    Action(
                        action="حمام ثلجي",
                        detail=(
                            "ضع وعاء الكاسترد في وعاء ثلج وماء",
                            "حرّك كل دقيقة بملعقة",
                        ),
                        checkpoint="ميزان الحرارة يقرأ 20°C",
                    ),
                    Action(
                        action="تغطية ملامسة",
                        detail=("ضع غلاف بلاستيكي مباشرة على السطح", "ضع في الثلاجة"),
                        duration="ساعتين كحد أدنى",
                    ),
                ),
            ),
        ),
        troubleshooting=(
            Troubleshooting(
                problem="تخثر أثناء الطبخ",
                causes=("تجاوز 85°C", "توقف التحريك"),
                solutions=(
                    "أزل من النار فوراً",
                    "صفِّ عبر مصفاة ناعمة جداً",
                    "اخفق بخلاط كهربائي 1 دقيقة",
                    "أضف 50جم زبدة واخلط",
                ),
            ),
            Troubleshooting(
                problem="رقيق جداً (لم يثخن)",
                causes=("لم يصل لـ82°C", "نشا قليل"),
                solutions=(
                    "أعد التسخين لـ82°C مع التحريك",
                    "أذب 1 ملعقة نشا في 2 ملعقة حليب بارد، أضفها للكاسترد، أعد التسخين",
                ),
            ),
        ),
    ),
    PreparationProtocol(
        key="ahmed-shawky-caramel",
        name="أحمد شوقي 1: كريمة كراميل",
        total_time="25 دقيقة",
        difficulty="متوسط",
        steps=(
            Step(
                number=1,
                name="خفق الزبدة",
                actions=(
                    Action(
                        action="اخفق 200جم زبدة (18°C) لمدة 90 ثانية حتى كريمية بيضاء",
                        rpm=200,
                    ),
                ),
            ),
            Step(
                number=2,
                name="دمج الكراميل",
                actions=(
                    Action(
                        action="أضف 250جم كراميل (22°C) على 3 دفعات، اخفق 30 ثانية بعد كل دفعة",
                        warnings=("كراميل بارد = كتل صلبة",),
                    ),
                ),
            ),
            Step(
                number=3,
                name="خفق ودمج الكريمة",
                actions=(
                    Action(action="اخفق 250جم كريمة خفق لـMedium Peak في وعاء منفصل"),
                    Action(action="اخفق 100جم سور كريم مع الكريمة 30 ثانية"),
                    Action(action="اطوِ في خليط الزبدة والكراميل"),
                ),
            ),
        ),
    ),
    PreparationProtocol(
        key="ahmed-shawky-sugar",
        name="أحمد شوقي 2: كريمة سكر",
        total_time="12 دقيقة",
        difficulty="سهل",
        steps=(
            Step(
                number=1,
                name="خفق الكريمة بالسكر",
                actions=(
                    Action(
                        action="اخفق 250جم كريمة خفق (2°C) مع إضافة 150جم سكر بودرة تدريجياً حتى Soft Peak",
                        duration="4-5 دقائق",
                    ),
                ),
            ),
            Step(
                number=2,
                name="طي السور كريم",
                actions=(
                    Action(
                        action="اطوِ 500جم سور كريم (6°C) على 3 دفعات بسباتولا فقط",
                        warnings=("لا تخفق - ستفقد الهواء",),
                    ),
                ),
            ),
        ),
    ),
    PreparationProtocol(
        key="ahmed-shawky-condensed",
        name="أحمد شوقي 3: حليب مكثف",
        total_time="20 دقيقة",
        difficulty="متوسط",
        steps=(
            Step(
                number=1,
                name="خفق الزبدة والجبن",
                actions=(
                    Action(
                        action="اخفق 100جم زبدة (18°C) لمدة 60 ثانية، أضف 120جم جبن كريمي (18°C)، اخفق 90 ثانية",
                        checkpoint="كريمي أملس بدون كتل",
                    ),
                ),
            ),
            Step(
                number=2,
                name="دمج الحليب المكثف",
                actions=(
                    Action(
                        action="أضف 400جم حليب مكثف (20°C) على 3 دفعات، اخفق 30 ثانية بعد كل دفعة",
                        checkpoint="كريمي موحد",
                    ),
                ),
            ),
        ),
    ),
    PreparationProtocol(
        key="ahmed-abdelsalam",
        name="أحمد عبد السلام: الثلاثي الغني",
        total_time="30 دقيقة",
        difficulty="متقدم",
        pre_preparation=PrePreparation(
            title="تساوي درجة الحرارة (حرج جداً)",
            duration="15-20 دقيقة",
            critical=True,
            tasks=(
                Action(
                    action="أخرج 200جم زبدة + 200جم جبن كريمي من الثلاجة، اتركها 15-20 دقيقة حتى 18-20°C",
                    checkpoint="قس كل مكون: يجب 18-20°C بالضبط (فرق لا يزيد عن 2°C)",
                ),
            ),
        ),
        steps=(
            Step(
                number=1,
                name="خفق الزبدة",
                actions=(
                    Action(
                        action="اخفق الزبدة 90 ثانية حتى كريمية فاتحة (حجم +40%)",
                        rpm=200,
                    ),
                ),
            ),
            Step(
                number=2,
                name="دمج الجبن",
                actions=(
                    Action(
                        action="أضف الجبن الكريمي على 3 دفعات، اخفق 30 ثانية بعد كل دفعة",
                        checkpoint="أملس تماماً بدون كتل",
                    ),
                ),
            ),
            Step(
                number=3,
                name="دمج الدولسي (نقطة حرجة)",
                actions=(
                    Action(
                        action="تأكد أن الدولسي 20-22°C، اخفقه منفرداً 2 دقيقة، ثم أضفه على دفعتين، اخفق برفق 120 RPM",
                        warnings=("خفق زائد = سيولة",),
                    ),
                ),
            ),
        ),
        troubleshooting=(
            Troubleshooting(
                problem="انفصال طبقتين",
                causes=("اختلاف حرارة المكونات",),
                solutions=("دفّئ لـ25°C واخفق بقوة 3-4 دقائق",),
            ),
        ),
    ),
)

PREPARATION_PROTOCOLS: Final[Mapping[str, PreparationProtocol]] = MappingProxyType(
    {protocol.key: protocol for protocol in _PROTOCOLS}
)


def get_preparation_protocol(
    key: str,
) -> PreparationProtocol | None:
    """Protocol for a preset key; ``None`` if the key has none."""
    return PREPARATION_PROTOCOLS.get(key)
