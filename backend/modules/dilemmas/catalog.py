"""
Built-in catalog of legal dilemmas.

The catalog is static data: records are immutable and looked up by their
integer ID. Debates reference catalog entries by ID only, so IDs must never
be renumbered once published.
"""

from typing import Optional

from .models import Dilemma, DilemmaSummary, Positions


DILEMMAS: tuple[Dilemma, ...] = (
    Dilemma(
        id=1,
        title="The Speluncean Explorers",
        description=(
            "Five cave explorers are trapped after a landslide. After 20 days without food, "
            "they learn via radio that rescue will take 10 more days. They calculate that "
            "survival requires eating one member. They kill and eat Roger Whetmore (who "
            "initially proposed the lottery but withdrew). The survivors are now on trial "
            "for murder."
        ),
        context=(
            "This case explores the tension between strict legal positivism and natural law "
            "theory, the role of necessity as a defense, and whether judges should consider "
            "the spirit versus letter of the law."
        ),
        positions=Positions(
            prosecution=(
                "The defendants should be convicted of murder. The law is clear: intentional "
                "killing is murder. No exception exists for necessity. Allowing such an "
                "exception would create dangerous precedent."
            ),
            defense=(
                "The defendants should be acquitted. The law of nature superseded positive law "
                "in their extreme circumstances. They acted out of necessity to preserve the "
                "greater number of lives."
            ),
        ),
    ),
    Dilemma(
        id=2,
        title="The Trolley Problem - Legal Edition",
        description=(
            "A railway worker sees a runaway trolley heading toward five workers. The only way "
            "to save them is to divert the trolley to a side track where one worker is present. "
            "The worker diverts the trolley, killing the one to save the five. They are now "
            "charged with manslaughter."
        ),
        context=(
            "This explores the necessity defense, the distinction between acts and omissions, "
            "and utilitarian versus deontological approaches to criminal liability."
        ),
        positions=Positions(
            prosecution=(
                "The defendant made an active choice to kill. You cannot justify murder by "
                "mathematics. The one worker had a right to life that was violated by "
                "deliberate action."
            ),
            defense=(
                "The defendant acted reasonably under necessity. The doctrine of lesser evils "
                "applies - saving five lives at the cost of one was the morally and legally "
                "correct choice."
            ),
        ),
    ),
    Dilemma(
        id=3,
        title="The Autonomous Vehicle Dilemma",
        description=(
            "An AI-driven car's brakes fail. It can either continue straight and kill three "
            "pedestrians, or swerve and kill one passenger. The AI swerves. The car "
            "manufacturer is sued for wrongful death by the passenger's family."
        ),
        context=(
            "This case examines products liability, algorithmic decision-making in "
            "life-or-death situations, and informed consent in the age of AI."
        ),
        positions=Positions(
            prosecution=(
                "The manufacturer programmed the car to sacrifice its own passenger. This "
                "violates the duty of care owed to customers. No person consents to being "
                "killed by their own vehicle."
            ),
            defense=(
                "The manufacturer followed sound ethical programming minimizing total harm. "
                "The passenger accepted reasonable risks by using an autonomous vehicle. The "
                "alternative was greater loss of life."
            ),
        ),
    ),
    Dilemma(
        id=4,
        title="The Whistleblower's Dilemma",
        description=(
            "A government contractor leaked classified documents revealing illegal mass "
            "surveillance of citizens. The leaks caused diplomatic damage but also led to "
            "reforms protecting civil liberties. They are charged under the Espionage Act."
        ),
        context=(
            "This explores the tension between national security and civil liberties, the "
            "limits of civil disobedience, and whether motive should affect criminal liability."
        ),
        positions=Positions(
            prosecution=(
                "The defendant broke their oath and the law. They endangered national security "
                "and lives of intelligence assets. Proper channels existed for whistleblowing. "
                "The ends don't justify illegal means."
            ),
            defense=(
                "The defendant exposed unconstitutional government actions. Civil disobedience "
                "is justified when the government itself breaks the law. The public interest "
                "defense should apply."
            ),
        ),
    ),
    Dilemma(
        id=5,
        title="The Right to Die",
        description=(
            "A doctor helped a terminally ill patient end their life at the patient's explicit, "
            "documented request. The patient had ALS with 6 months to live and was suffering "
            "greatly. The doctor is charged with assisted suicide in a state where it's illegal."
        ),
        context=(
            "This examines bodily autonomy, the role of medical professionals, religious versus "
            "secular law, and the state's interest in preserving life."
        ),
        positions=Positions(
            prosecution=(
                "The sanctity of life is paramount. Doctors must not kill - it violates the "
                "Hippocratic oath. Legalizing this creates a slippery slope endangering "
                "vulnerable populations."
            ),
            defense=(
                "Patient autonomy is fundamental. Forcing someone to suffer against their will "
                "is cruel. The doctor showed compassion and respected the patient's informed, "
                "competent choice."
            ),
        ),
    ),
    Dilemma(
        id=6,
        title="The AI Art Theft",
        description=(
            "An AI company trained their image generator on millions of copyrighted artworks "
            "without permission. Artists sue for copyright infringement. The AI can now "
            "generate images 'in the style of' specific artists."
        ),
        context=(
            "This explores copyright in the digital age, the boundaries of fair use, and how "
            "law should adapt to technologies that challenge traditional frameworks."
        ),
        positions=Positions(
            prosecution=(
                "Training on copyrighted works is unauthorized reproduction. The AI's outputs "
                "are derivative works. Artists' livelihoods and creative rights are being "
                "stolen at scale."
            ),
            defense=(
                "Training is transformative fair use - like a human learning by studying art. "
                "The AI doesn't copy but learns concepts. This is how all learning works, "
                "human or machine."
            ),
        ),
    ),
    Dilemma(
        id=7,
        title="The Corporate Manslaughter",
        description=(
            "A pharmaceutical company rushed an opioid painkiller to market, downplaying "
            "addiction risks. Internal emails show executives knew about the dangers. 50,000 "
            "deaths are linked to the drug. Prosecutors seek criminal charges against the CEO "
            "personally."
        ),
        context=(
            "This examines corporate criminal liability, the problem of diffuse responsibility "
            "in organizations, and whether executives should face personal criminal "
            "consequences for corporate decisions."
        ),
        positions=Positions(
            prosecution=(
                "The CEO made decisions that foreseeably caused deaths for profit. Corporate "
                "executives cannot hide behind the corporate veil for criminal conduct. "
                "Deterrence requires individual accountability."
            ),
            defense=(
                "The CEO relied on regulatory approval and scientific advisors. Criminal law "
                "requires individual acts and intent. The CEO didn't personally cause any "
                "death. Civil remedies are appropriate, not criminal."
            ),
        ),
    ),
    Dilemma(
        id=8,
        title="The Stand Your Ground Case",
        description=(
            "A homeowner shot and killed an unarmed intruder who had broken in at night. The "
            "intruder was a teenager who appeared to be trying to steal electronics. The "
            "homeowner claims self-defense under the state's stand your ground law."
        ),
        context=(
            "This explores self-defense law, the castle doctrine, proportionality in use of "
            "force, and racial dimensions of stand your ground laws."
        ),
        positions=Positions(
            prosecution=(
                "The response was disproportionate. An unarmed teenager stealing property does "
                "not justify lethal force. The homeowner had a duty to retreat or use "
                "non-lethal means."
            ),
            defense=(
                "The homeowner had no way to know the intruder was unarmed or just a teenager. "
                "In the dark, facing an intruder, reasonable fear justified the response. "
                "Castle doctrine applies."
            ),
        ),
    ),
)


class StaticCaseCatalog:
    """
    Case catalog backed by an in-process tuple of dilemmas.

    Implements ICaseCatalog.
    """

    def __init__(self, dilemmas: tuple[Dilemma, ...] = DILEMMAS):
        self._by_id = {d.id: d for d in dilemmas}

    def list_dilemmas(self) -> list[DilemmaSummary]:
        """List catalog entries in ID order."""
        return [
            DilemmaSummary(id=dilemma_id, title=d.title, description=d.description)
            for dilemma_id, d in sorted(self._by_id.items())
        ]

    def get_dilemma(self, dilemma_id: int) -> Optional[Dilemma]:
        """Look up a dilemma by catalog ID."""
        # bool is an int subclass; True must not resolve to dilemma 1
        if isinstance(dilemma_id, bool) or not isinstance(dilemma_id, int):
            return None
        return self._by_id.get(dilemma_id)


# Module-level instance getter
_catalog_instance: Optional[StaticCaseCatalog] = None


def get_case_catalog() -> StaticCaseCatalog:
    """Get the case catalog singleton."""
    global _catalog_instance
    if _catalog_instance is None:
        _catalog_instance = StaticCaseCatalog()
    return _catalog_instance
