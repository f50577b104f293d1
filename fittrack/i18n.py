# -*- coding: utf-8 -*-
"""Message catalogs (en, pl) and locale resolution."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import Request

from .config import settings

SUPPORTED_LOCALES = ("en", "pl")

_WEEKDAYS: Dict[str, List[str]] = {
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
    "pl": ["Poniedziałek", "Wtorek", "Środa", "Czwartek", "Piątek", "Sobota", "Niedziela"],
}

_CATALOG: Dict[str, Dict[str, str]] = {
    "en": {
        "day.suffix.training": "Training",
        "day.suffix.diet": "Diet",
        "day.fallback.training": "Training",
        "day.fallback.diet": "Diet day",
        "import.copy_prefix": "Copy",
        "error.validation": "Some fields are missing or invalid.",
        "error.incomplete_plan": "The plan name is required.",
        "error.incomplete_day": "Day {day} must have a day of week, a name and a numeric order.",
        "error.incomplete_item": "Item {item} of day {day} is incomplete.",
        "error.duplicate_name": 'A plan named "{name}" already exists.',
        "error.duplicate_analysis_name": 'An analysis named "{name}" already exists.',
        "error.unsupported_format": "Unsupported file format. Available formats: json, xml, yaml.",
        "error.import_parse": "The file could not be read as a {kind} plan: {reason}",
        "error.import_parse_analysis": "The file could not be read as a saved analysis: {reason}",
        "error.insufficient_data": "Not enough data to compute the correlation.",
        "error.transport": "The {service} service is unavailable. Please try again later.",
        "error.not_found": "{resource} was not found.",
        "error.upload_too_large": "The file is larger than {limit} MB.",
        "resource.plan": "The plan",
        "resource.day": "The day",
        "resource.item": "The item",
        "resource.progress": "The progress entry",
        "resource.analysis": "The analysis",
        "resource.user": "The user",
        "band.strong": "Strong",
        "band.moderate": "Moderate",
        "band.weak": "Weak",
        "band.very_weak": "Very weak",
        "correlation.positive": "{band} positive correlation",
        "correlation.negative": "{band} negative correlation",
        "correlation.none": "No correlation",
        "trend.both_increase": "Both indicators increased over the period.",
        "trend.both_decrease": "Both indicators decreased over the period.",
        "trend.health_increase_economic_decrease": "The health indicator increased while the economic indicator decreased.",
        "trend.health_decrease_economic_increase": "The health indicator decreased while the economic indicator increased.",
        "analysis.obesity_vs_health_expenditure": "Obesity vs health expenditure",
        "analysis.gdp_vs_physical_activity": "GDP per capita vs physical activity",
        "analysis.death_probability_vs_urbanization": "Probability of death vs urbanization",
        "analysis.diabetes_vs_gini_index": "Diabetes vs income inequality",
        "auth.not_authenticated": "Not authenticated. Please log in.",
        "auth.invalid_token": "The session token is invalid.",
        "auth.token_expired": "The session has expired. Please log in again.",
        "auth.user_not_found": "The account no longer exists.",
        "auth.invalid_credentials": "Invalid email or password.",
        "auth.email_taken": "This email is already registered.",
        "auth.wrong_password": "The current password is incorrect.",
        "interpretation.obesity_vs_health_expenditure.negative.both_increase": "A negative correlation while both indicators rise suggests that obesity grows more slowly in years of higher health spending. Health interventions seem to work, but not enough to stop the trend.",
        "interpretation.obesity_vs_health_expenditure.negative.both_decrease": "A negative correlation while both indicators fall suggests that lower health spending goes with a faster drop in obesity. This unexpected result points to other factors having a larger effect on population health.",
        "interpretation.obesity_vs_health_expenditure.negative.health_increase_economic_decrease": "A negative correlation with rising obesity and falling health spending suggests that cutting health budgets may add to the obesity problem. Funding for prevention programmes matters.",
        "interpretation.obesity_vs_health_expenditure.negative.health_decrease_economic_increase": "A negative correlation with falling obesity and rising health spending suggests that larger health budgets pay off in the fight against obesity. Investment in public health appears effective.",
        "interpretation.obesity_vs_health_expenditure.positive.both_increase": "A positive correlation while both indicators rise suggests that health spending grows in response to rising obesity. The investment looks like a reaction to an existing problem rather than effective prevention.",
        "interpretation.obesity_vs_health_expenditure.positive.both_decrease": "A positive correlation while both indicators fall suggests that lower health spending goes with lower obesity. Other socio-economic factors may play a bigger role in population health.",
        "interpretation.obesity_vs_health_expenditure.positive.health_increase_economic_decrease": "A positive correlation with rising obesity and falling health spending suggests that smaller health budgets may worsen the obesity problem, a possible consequence of spending cuts.",
        "interpretation.obesity_vs_health_expenditure.positive.health_decrease_economic_increase": "A positive correlation with falling obesity and rising health spending suggests that the extra spending is effective against obesity. Adequate funding of health programmes brings the expected results.",
        "interpretation.gdp_vs_physical_activity.negative.both_increase": "A negative correlation while both indicators rise suggests that insufficient physical activity grows with GDP per capita, but more slowly than expected. Some aspects of economic growth may raise health awareness.",
        "interpretation.gdp_vs_physical_activity.negative.both_decrease": "A negative correlation while both indicators fall suggests that lower GDP per capita goes with a faster drop in insufficient physical activity. People may lead more active lives in harder economic conditions.",
        "interpretation.gdp_vs_physical_activity.negative.health_increase_economic_decrease": "A negative correlation with rising physical inactivity and falling GDP suggests that a worsening economy may slow the growth of inactivity. The link between wealth and lifestyle is complex.",
        "interpretation.gdp_vs_physical_activity.negative.health_decrease_economic_increase": "A negative correlation with falling physical inactivity and rising GDP suggests that economic growth supports a more active population, possibly through better recreation options and health education.",
        "interpretation.gdp_vs_physical_activity.positive.both_increase": "A positive correlation while both indicators rise suggests that growing GDP per capita goes with more insufficient physical activity. Lifestyles become more sedentary as the society gets wealthier.",
        "interpretation.gdp_vs_physical_activity.positive.both_decrease": "A positive correlation while both indicators fall suggests that lower GDP per capita goes with less insufficient physical activity. Harder economic conditions may discourage a sedentary lifestyle.",
        "interpretation.gdp_vs_physical_activity.positive.health_increase_economic_decrease": "A positive correlation with rising physical inactivity and falling GDP suggests that sedentary habits keep spreading even in an economic downturn. The pattern looks independent of the current economy.",
        "interpretation.gdp_vs_physical_activity.positive.health_decrease_economic_increase": "A positive correlation with falling physical inactivity and rising GDP shows this period going against the usual drift of wealthier societies towards inactivity, possibly thanks to programmes promoting exercise.",
        "interpretation.death_probability_vs_urbanization.negative.both_increase": "A negative correlation while both indicators rise suggests that the probability of death from noncommunicable diseases grows more slowly as urbanization increases. Cities may offer better access to specialist care.",
        "interpretation.death_probability_vs_urbanization.negative.both_decrease": "A negative correlation while both indicators fall suggests that falling urbanization goes with a slower drop in the probability of death. Health care may be easier to reach in cities than in rural areas.",
        "interpretation.death_probability_vs_urbanization.negative.health_increase_economic_decrease": "A negative correlation with a rising probability of death and falling urbanization suggests that a shrinking urban population may lose access to specialist care, a sign of unequal access to medical services.",
        "interpretation.death_probability_vs_urbanization.negative.health_decrease_economic_increase": "A negative correlation with a falling probability of death and rising urbanization suggests that urbanization brings better health outcomes through access to care, education and prevention in cities.",
        "interpretation.death_probability_vs_urbanization.positive.both_increase": "A positive correlation while both indicators rise suggests that growing urbanization goes with a higher probability of death from noncommunicable diseases. Urban lifestyle factors such as stress, pollution and inactivity may be to blame.",
        "interpretation.death_probability_vs_urbanization.positive.both_decrease": "A positive correlation while both indicators fall suggests that falling urbanization goes with a lower probability of death from noncommunicable diseases. Living conditions outside large cities may be healthier.",
        "interpretation.death_probability_vs_urbanization.positive.health_increase_economic_decrease": "A positive correlation with a rising probability of death and falling urbanization suggests that risk factors for noncommunicable diseases grow even as urbanization falls. Place of residence and health are linked in complex ways.",
        "interpretation.death_probability_vs_urbanization.positive.health_decrease_economic_increase": "A positive correlation with a falling probability of death and rising urbanization shows an improvement despite the usual link between cities and worse outcomes, possibly thanks to urban public health programmes.",
        "interpretation.diabetes_vs_gini_index.negative.both_increase": "A negative correlation while both indicators rise suggests that diabetes prevalence grows more slowly in periods of higher income inequality. This unexpected result needs deeper analysis of cultural or behavioural factors.",
        "interpretation.diabetes_vs_gini_index.negative.both_decrease": "A negative correlation while both indicators fall suggests that shrinking income inequality goes with a slower drop in diabetes prevalence. Other factors may drive how widespread the disease is.",
        "interpretation.diabetes_vs_gini_index.negative.health_increase_economic_decrease": "A negative correlation with rising diabetes prevalence and a falling Gini index suggests that lower inequality goes with more diabetes. Changes in lifestyle or in access to certain foods may explain this surprising result.",
        "interpretation.diabetes_vs_gini_index.negative.health_decrease_economic_increase": "A negative correlation with falling diabetes prevalence and a rising Gini index suggests that greater inequality goes with less diabetes. This unexpected result calls for research into specific socio-economic factors.",
        "interpretation.diabetes_vs_gini_index.positive.both_increase": "A positive correlation while both indicators rise suggests that growing income inequality goes with more diabetes. Lower-income groups may have limited access to healthy food and health care.",
        "interpretation.diabetes_vs_gini_index.positive.both_decrease": "A positive correlation while both indicators fall suggests that lower income inequality goes with less diabetes, supporting the health benefit of a more equal income distribution.",
        "interpretation.diabetes_vs_gini_index.positive.health_increase_economic_decrease": "A positive correlation with rising diabetes prevalence and a falling Gini index suggests that other factors push diabetes up despite shrinking inequality. Prevention needs a broad approach.",
        "interpretation.diabetes_vs_gini_index.positive.health_decrease_economic_increase": "A positive correlation with falling diabetes prevalence and a rising Gini index suggests that other factors bring diabetes down despite growing inequality. The determinants of public health are complex.",
    },
    "pl": {
        "day.suffix.training": "Trening",
        "day.suffix.diet": "Dieta",
        "day.fallback.training": "Trening",
        "day.fallback.diet": "Dzień Dietetyczny",
        "import.copy_prefix": "Kopia",
        "error.validation": "Niektóre pola są puste lub nieprawidłowe.",
        "error.incomplete_plan": "Nazwa planu jest wymagana.",
        "error.incomplete_day": "Dzień {day} musi zawierać dzień tygodnia, nazwę i kolejność.",
        "error.incomplete_item": "Pozycja {item} dnia {day} jest niekompletna.",
        "error.duplicate_name": 'Plan o nazwie "{name}" już istnieje.',
        "error.duplicate_analysis_name": 'Analiza o nazwie "{name}" już istnieje.',
        "error.unsupported_format": "Nieobsługiwany format pliku. Dostępne formaty: json, xml, yaml.",
        "error.import_parse": "Nie można odczytać pliku jako planu ({kind}): {reason}",
        "error.import_parse_analysis": "Nie można odczytać pliku jako zapisanej analizy: {reason}",
        "error.insufficient_data": "Brak wystarczających danych do obliczenia korelacji.",
        "error.transport": "Usługa {service} jest niedostępna. Spróbuj ponownie później.",
        "error.not_found": "Nie znaleziono: {resource}.",
        "error.upload_too_large": "Plik jest większy niż {limit} MB.",
        "resource.plan": "plan",
        "resource.day": "dzień",
        "resource.item": "element",
        "resource.progress": "wpis postępu",
        "resource.analysis": "analiza",
        "resource.user": "użytkownik",
        "band.strong": "Silna",
        "band.moderate": "Umiarkowana",
        "band.weak": "Słaba",
        "band.very_weak": "Bardzo słaba",
        "correlation.positive": "{band} korelacja dodatnia",
        "correlation.negative": "{band} korelacja ujemna",
        "correlation.none": "Brak korelacji",
        "trend.both_increase": "Oba wskaźniki wzrosły w badanym okresie.",
        "trend.both_decrease": "Oba wskaźniki spadły w badanym okresie.",
        "trend.health_increase_economic_decrease": "Wskaźnik zdrowotny wzrósł, a ekonomiczny spadł.",
        "trend.health_decrease_economic_increase": "Wskaźnik zdrowotny spadł, a ekonomiczny wzrósł.",
        "analysis.obesity_vs_health_expenditure": "Otyłość vs wydatki na ochronę zdrowia",
        "analysis.gdp_vs_physical_activity": "PKB per capita vs aktywność fizyczna",
        "analysis.death_probability_vs_urbanization": "Prawdopodobieństwo zgonu vs urbanizacja",
        "analysis.diabetes_vs_gini_index": "Cukrzyca vs nierówności dochodowe",
        "auth.not_authenticated": "Brak uwierzytelnienia. Zaloguj się.",
        "auth.invalid_token": "Token sesji jest nieprawidłowy.",
        "auth.token_expired": "Sesja wygasła. Zaloguj się ponownie.",
        "auth.user_not_found": "To konto już nie istnieje.",
        "auth.invalid_credentials": "Nieprawidłowy e-mail lub hasło.",
        "auth.email_taken": "Ten adres e-mail jest już zarejestrowany.",
        "auth.wrong_password": "Obecne hasło jest nieprawidłowe.",
        "interpretation.obesity_vs_health_expenditure.negative.both_increase": "Ujemna korelacja przy wzroście obu wskaźników może sugerować, że pomimo rosnących wydatków na ochronę zdrowia, tempo wzrostu otyłości jest wolniejsze w okresach większych nakładów - wskazuje to na pewną skuteczność interwencji zdrowotnych, choć niewystarczającą do zatrzymania trendu.",
        "interpretation.obesity_vs_health_expenditure.negative.both_decrease": "Ujemna korelacja przy spadku obu wskaźników sugeruje, że zmniejszenie wydatków na ochronę zdrowia wiąże się z szybszym spadkiem wskaźnika otyłości - to nieoczekiwany wynik, który może wskazywać na inne czynniki mające większy wpływ na zdrowie populacji.",
        "interpretation.obesity_vs_health_expenditure.negative.health_increase_economic_decrease": "Ujemna korelacja przy wzroście otyłości i spadku wydatków na zdrowie sugeruje, że ograniczanie nakładów na ochronę zdrowia może przyczyniać się do wzrostu problemu otyłości - wskazuje to na znaczenie finansowania programów profilaktyki zdrowotnej.",
        "interpretation.obesity_vs_health_expenditure.negative.health_decrease_economic_increase": "Ujemna korelacja przy spadku otyłości i wzroście wydatków na zdrowie sugeruje, że zwiększone nakłady na ochronę zdrowia przynoszą pozytywne rezultaty w walce z otyłością - potwierdza to skuteczność inwestycji w zdrowie publiczne.",
        "interpretation.obesity_vs_health_expenditure.positive.both_increase": "Dodatnia korelacja przy wzroście obu wskaźników sugeruje, że zwiększone wydatki na ochronę zdrowia są prawdopodobnie reakcją na rosnący problem otyłości - może to wskazywać, że inwestycje są odpowiedzią na istniejący problem, a nie skuteczną prewencją.",
        "interpretation.obesity_vs_health_expenditure.positive.both_decrease": "Dodatnia korelacja przy spadku obu wskaźników sugeruje, że zmniejszenie wydatków na ochronę zdrowia wiąże się ze spadkiem wskaźnika otyłości - może to wskazywać na większą rolę innych czynników społeczno-ekonomicznych w kształtowaniu zdrowia populacji.",
        "interpretation.obesity_vs_health_expenditure.positive.health_increase_economic_decrease": "Dodatnia korelacja przy wzroście otyłości i spadku wydatków na zdrowie sugeruje, że zmniejszone nakłady na ochronę zdrowia mogą przyczyniać się do nasilenia problemu otyłości - wskazuje to na potencjalne konsekwencje cięć w budżetach zdrowotnych.",
        "interpretation.obesity_vs_health_expenditure.positive.health_decrease_economic_increase": "Dodatnia korelacja przy spadku otyłości i wzroście wydatków na zdrowie sugeruje, że zwiększone nakłady są skuteczne w walce z otyłością - potwierdza to, że odpowiednie finansowanie programów zdrowotnych przynosi oczekiwane efekty.",
        "interpretation.gdp_vs_physical_activity.negative.both_increase": "Ujemna korelacja przy wzroście obu wskaźników sugeruje, że pomimo rosnącego PKB per capita, zwiększa się wskaźnik niewystarczającej aktywności fizycznej, ale w tempie wolniejszym niż można by oczekiwać - może to wskazywać na pozytywny wpływ pewnych aspektów wzrostu gospodarczego na świadomość zdrowotną.",
        "interpretation.gdp_vs_physical_activity.negative.both_decrease": "Ujemna korelacja przy spadku obu wskaźników sugeruje, że spadek PKB per capita wiąże się z szybszym spadkiem niewystarczającej aktywności fizycznej - może to wskazywać, że w trudniejszych warunkach ekonomicznych ludzie prowadzą bardziej aktywny fizycznie tryb życia.",
        "interpretation.gdp_vs_physical_activity.negative.health_increase_economic_decrease": "Ujemna korelacja przy wzroście niewystarczającej aktywności fizycznej i spadku PKB sugeruje, że pogarszająca się sytuacja ekonomiczna może paradoksalnie spowalniać wzrost bierności fizycznej - wskazuje to na złożone zależności między zamożnością a stylem życia.",
        "interpretation.gdp_vs_physical_activity.negative.health_decrease_economic_increase": "Ujemna korelacja przy spadku niewystarczającej aktywności fizycznej i wzroście PKB sugeruje, że rozwój gospodarczy sprzyja większej aktywności fizycznej - może to być wynikiem większych możliwości rekreacyjnych i lepszej edukacji zdrowotnej w bogatszych społeczeństwach.",
        "interpretation.gdp_vs_physical_activity.positive.both_increase": "Dodatnia korelacja przy wzroście obu wskaźników sugeruje, że wzrost PKB per capita wiąże się ze wzrostem niewystarczającej aktywności fizycznej - wskazuje to na bardziej siedzący tryb życia w miarę rozwoju gospodarczego i wzrostu zamożności społeczeństwa.",
        "interpretation.gdp_vs_physical_activity.positive.both_decrease": "Dodatnia korelacja przy spadku obu wskaźników sugeruje, że spadek PKB per capita wiąże się ze spadkiem niewystarczającej aktywności fizycznej - może to wskazywać, że w trudniejszych warunkach ekonomicznych ludzie mają mniejszą skłonność do siedzącego trybu życia.",
        "interpretation.gdp_vs_physical_activity.positive.health_increase_economic_decrease": "Dodatnia korelacja przy wzroście niewystarczającej aktywności fizycznej i spadku PKB sugeruje, że nawet w okresie pogorszenia sytuacji gospodarczej trend siedzącego trybu życia może się nasilać - może to wskazywać na utrwalone wzorce zachowań niezależne od bieżącej sytuacji ekonomicznej.",
        "interpretation.gdp_vs_physical_activity.positive.health_decrease_economic_increase": "Dodatnia korelacja przy spadku niewystarczającej aktywności fizycznej i wzroście PKB sugeruje, że pomimo ogólnej tendencji do mniej aktywnego trybu życia w bogatszych społeczeństwach, ten konkretny okres pokazuje odwrotny trend - może to być wynikiem skutecznych programów promujących aktywność fizyczną.",
        "interpretation.death_probability_vs_urbanization.negative.both_increase": "Ujemna korelacja przy wzroście obu wskaźników sugeruje, że pomimo rosnącej urbanizacji, tempo wzrostu prawdopodobieństwa zgonu z powodu chorób niezakaźnych jest niższe - może to wskazywać na lepszy dostęp do specjalistycznej opieki zdrowotnej w miastach pomimo innych negatywnych czynników.",
        "interpretation.death_probability_vs_urbanization.negative.both_decrease": "Ujemna korelacja przy spadku obu wskaźników sugeruje, że spadek poziomu urbanizacji wiąże się z wolniejszym spadkiem prawdopodobieństwa zgonu - może to wskazywać na lepszy dostęp do opieki zdrowotnej w miastach w porównaniu z obszarami wiejskimi.",
        "interpretation.death_probability_vs_urbanization.negative.health_increase_economic_decrease": "Ujemna korelacja przy wzroście prawdopodobieństwa zgonu i spadku urbanizacji sugeruje, że zmniejszanie się populacji miejskiej może wiązać się z ograniczonym dostępem do specjalistycznej opieki zdrowotnej - wskazuje to na potencjalne nierówności w dostępie do usług medycznych.",
        "interpretation.death_probability_vs_urbanization.negative.health_decrease_economic_increase": "Ujemna korelacja przy spadku prawdopodobieństwa zgonu i wzroście urbanizacji sugeruje, że wyższy poziom urbanizacji wiąże się z lepszymi wynikami zdrowotnymi - może to wynikać z lepszego dostępu do opieki zdrowotnej, edukacji i programów profilaktycznych w miastach.",
        "interpretation.death_probability_vs_urbanization.positive.both_increase": "Dodatnia korelacja przy wzroście obu wskaźników sugeruje, że rosnący poziom urbanizacji wiąże się ze wzrostem prawdopodobieństwa zgonu z powodu chorób niezakaźnych - może to wskazywać na negatywny wpływ miejskiego stylu życia (stres, zanieczyszczenie, siedzący tryb życia).",
        "interpretation.death_probability_vs_urbanization.positive.both_decrease": "Dodatnia korelacja przy spadku obu wskaźników sugeruje, że spadek poziomu urbanizacji wiąże się ze spadkiem prawdopodobieństwa zgonu z powodu chorób niezakaźnych - może to wskazywać na zdrowsze warunki życia poza dużymi ośrodkami miejskimi.",
        "interpretation.death_probability_vs_urbanization.positive.health_increase_economic_decrease": "Dodatnia korelacja przy wzroście prawdopodobieństwa zgonu i spadku urbanizacji sugeruje, że czynniki ryzyka dla chorób niezakaźnych mogą narastać pomimo spadku poziomu urbanizacji - wskazuje to na złożone zależności między miejscem zamieszkania a zdrowiem.",
        "interpretation.death_probability_vs_urbanization.positive.health_decrease_economic_increase": "Dodatnia korelacja przy spadku prawdopodobieństwa zgonu i wzroście urbanizacji sugeruje, że pomimo ogólnej tendencji do gorszych wyników zdrowotnych w miastach, ten okres pokazuje poprawę - może to być wynikiem skutecznych programów zdrowia publicznego w obszarach miejskich.",
        "interpretation.diabetes_vs_gini_index.negative.both_increase": "Ujemna korelacja przy wzroście obu wskaźników sugeruje, że pomimo rosnącej prewalencji cukrzycy, jej wzrost jest wolniejszy w okresach większych nierówności dochodowych - to nieoczekiwany wynik wymagający głębszej analizy, być może związany z czynnikami kulturowymi lub behawioralnymi.",
        "interpretation.diabetes_vs_gini_index.negative.both_decrease": "Ujemna korelacja przy spadku obu wskaźników sugeruje, że zmniejszanie się nierówności dochodowych wiąże się z wolniejszym spadkiem prewalencji cukrzycy - to nieoczekiwany wynik, który może wskazywać na inne istotne czynniki wpływające na rozpowszechnienie tej choroby.",
        "interpretation.diabetes_vs_gini_index.negative.health_increase_economic_decrease": "Ujemna korelacja przy wzroście prewalencji cukrzycy i spadku wskaźnika Giniego sugeruje, że spadek nierówności dochodowych wiąże się ze wzrostem występowania cukrzycy - to zaskakujący wynik, który może sugerować zmiany w stylu życia lub dostępie do określonych produktów żywnościowych.",
        "interpretation.diabetes_vs_gini_index.negative.health_decrease_economic_increase": "Ujemna korelacja przy spadku prewalencji cukrzycy i wzroście wskaźnika Giniego sugeruje, że większe nierówności dochodowe wiążą się z niższą prewalencją cukrzycy - to nieoczekiwany wynik wymagający dodatkowych badań nad specyficznymi czynnikami społeczno-ekonomicznymi.",
        "interpretation.diabetes_vs_gini_index.positive.both_increase": "Dodatnia korelacja przy wzroście obu wskaźników sugeruje, że rosnące nierówności dochodowe wiążą się ze wzrostem prewalencji cukrzycy - może to wskazywać na ograniczony dostęp do zdrowej żywności i opieki zdrowotnej wśród grup o niższych dochodach.",
        "interpretation.diabetes_vs_gini_index.positive.both_decrease": "Dodatnia korelacja przy spadku obu wskaźników sugeruje, że zmniejszenie nierówności dochodowych wiąże się ze spadkiem prewalencji cukrzycy - potwierdza to pozytywny wpływ bardziej egalitarnego rozkładu dochodów na zdrowie publiczne.",
        "interpretation.diabetes_vs_gini_index.positive.health_increase_economic_decrease": "Dodatnia korelacja przy wzroście prewalencji cukrzycy i spadku wskaźnika Giniego sugeruje, że pomimo zmniejszających się nierówności dochodowych, inne czynniki przyczyniają się do wzrostu zachorowalności na cukrzycę - wskazuje to na potrzebę kompleksowego podejścia do profilaktyki tej choroby.",
        "interpretation.diabetes_vs_gini_index.positive.health_decrease_economic_increase": "Dodatnia korelacja przy spadku prewalencji cukrzycy i wzroście wskaźnika Giniego sugeruje, że pomimo rosnących nierówności dochodowych, inne czynniki przyczyniają się do spadku zachorowalności na cukrzycę - wskazuje to na złożoność determinantów zdrowia publicznego.",
    },
}


def normalize_locale(locale: Optional[str]) -> str:
    tag = (locale or "").strip().lower().replace("_", "-").split("-", 1)[0]
    if tag in SUPPORTED_LOCALES:
        return tag
    default = settings.locale if settings.locale in SUPPORTED_LOCALES else "en"
    return default


def translate(key: str, locale: Optional[str] = None, **params: Any) -> str:
    loc = normalize_locale(locale)
    template = _CATALOG[loc].get(key) or _CATALOG["en"].get(key) or key
    if not params:
        return template
    try:
        return template.format(**params)
    except (KeyError, IndexError):
        return template


def weekdays(locale: Optional[str] = None) -> List[str]:
    return list(_WEEKDAYS[normalize_locale(locale)])


def locale_from_header(accept_language: Optional[str]) -> str:
    """Pick the first supported tag of an Accept-Language header."""
    for part in (accept_language or "").split(","):
        tag = part.split(";", 1)[0].strip().lower().split("-", 1)[0]
        if tag in SUPPORTED_LOCALES:
            return tag
    return normalize_locale(None)


def get_locale(request: Request) -> str:
    return locale_from_header(request.headers.get("accept-language"))
