"""Embedded default feed sources.

Independent technical blogs, most of them frequently on the Hacker News
front page. The list is fixed at build time; a ``sources.yaml`` file can
replace it at run time.
"""

from typing import Tuple

from .models import SourceConfig

DEFAULT_SOURCES: Tuple[SourceConfig, ...] = (
    SourceConfig(name="simonwillison.net", url="https://simonwillison.net/atom/everything/"),
    SourceConfig(name="jeffgeerling.com", url="https://www.jeffgeerling.com/blog.xml"),
    SourceConfig(name="seangoedecke.com", url="https://www.seangoedecke.com/rss.xml"),
    SourceConfig(name="krebsonsecurity.com", url="https://krebsonsecurity.com/feed/"),
    SourceConfig(name="daringfireball.net", url="https://daringfireball.net/feeds/main"),
    SourceConfig(name="ericmigi.com", url="https://ericmigi.com/rss.xml"),
    SourceConfig(name="antirez.com", url="http://antirez.com/rss"),
    SourceConfig(name="idiallo.com", url="https://idiallo.com/feed.rss"),
    SourceConfig(name="maurycyz.com", url="https://maurycyz.com/index.xml"),
    SourceConfig(name="pluralistic.net", url="https://pluralistic.net/feed/"),
    SourceConfig(name="shkspr.mobi", url="https://shkspr.mobi/blog/feed/"),
    SourceConfig(name="lcamtuf.substack.com", url="https://lcamtuf.substack.com/feed"),
    SourceConfig(name="mitchellh.com", url="https://mitchellh.com/feed.xml"),
    SourceConfig(name="dynomight.net", url="https://dynomight.net/feed.xml"),
    SourceConfig(name="utcc.utoronto.ca/~cks", url="https://utcc.utoronto.ca/~cks/space/blog/?atom"),
    SourceConfig(name="xeiaso.net", url="https://xeiaso.net/blog.rss"),
    SourceConfig(name="devblogs.microsoft.com/oldnewthing", url="https://devblogs.microsoft.com/oldnewthing/feed"),
    SourceConfig(name="righto.com", url="https://www.righto.com/feeds/posts/default"),
    SourceConfig(name="lucumr.pocoo.org", url="https://lucumr.pocoo.org/feed.atom"),
    SourceConfig(name="skyfall.dev", url="https://skyfall.dev/rss.xml"),
    SourceConfig(name="garymarcus.substack.com", url="https://garymarcus.substack.com/feed"),
    SourceConfig(name="rachelbythebay.com", url="https://rachelbythebay.com/w/atom.xml"),
    SourceConfig(name="overreacted.io", url="https://overreacted.io/rss.xml"),
    SourceConfig(name="timsh.org", url="https://timsh.org/rss/"),
    SourceConfig(name="johndcook.com", url="https://www.johndcook.com/blog/feed/"),
    SourceConfig(name="gilesthomas.com", url="https://gilesthomas.com/feed/rss.xml"),
    SourceConfig(name="matklad.github.io", url="https://matklad.github.io/feed.xml"),
    SourceConfig(name="derekthompson.org", url="https://www.derekthompson.org/feed"),
    SourceConfig(name="evanhahn.com", url="https://evanhahn.com/feed.xml"),
    SourceConfig(name="terriblesoftware.org", url="https://terriblesoftware.org/feed/"),
    SourceConfig(name="rakhim.exotext.com", url="https://rakhim.exotext.com/rss.xml"),
    SourceConfig(name="joanwestenberg.com", url="https://joanwestenberg.com/rss"),
    SourceConfig(name="xania.org", url="https://xania.org/feed"),
    SourceConfig(name="micahflee.com", url="https://micahflee.com/feed/"),
    SourceConfig(name="nesbitt.io", url="https://nesbitt.io/feed.xml"),
    SourceConfig(name="construction-physics.com", url="https://www.construction-physics.com/feed"),
    SourceConfig(name="tedium.co", url="https://feed.tedium.co/"),
    SourceConfig(name="susam.net", url="https://susam.net/feed.xml"),
    SourceConfig(name="entropicthoughts.com", url="https://entropicthoughts.com/feed.xml"),
    SourceConfig(name="buttondown.com/hillelwayne", url="https://buttondown.com/hillelwayne/rss"),
    SourceConfig(name="dwarkesh.com", url="https://www.dwarkeshpatel.com/feed"),
    SourceConfig(name="borretti.me", url="https://borretti.me/feed.xml"),
    SourceConfig(name="wheresyoured.at", url="https://www.wheresyoured.at/rss/"),
    SourceConfig(name="jayd.ml", url="https://jayd.ml/feed.xml"),
    SourceConfig(name="minimaxir.com", url="https://minimaxir.com/index.xml"),
    SourceConfig(name="geohot.github.io", url="https://geohot.github.io/blog/feed.xml"),
    SourceConfig(name="paulgraham.com", url="http://www.aaronsw.com/2002/feeds/pgessays.rss"),
    SourceConfig(name="filfre.net", url="https://www.filfre.net/feed/"),
    SourceConfig(name="blog.jim-nielsen.com", url="https://blog.jim-nielsen.com/feed.xml"),
    SourceConfig(name="dfarq.homeip.net", url="https://dfarq.homeip.net/feed/"),
    SourceConfig(name="jyn.dev", url="https://jyn.dev/atom.xml"),
    SourceConfig(name="geoffreylitt.com", url="https://www.geoffreylitt.com/feed.xml"),
    SourceConfig(name="downtowndougbrown.com", url="https://www.downtowndougbrown.com/feed/"),
    SourceConfig(name="brutecat.com", url="https://brutecat.com/rss.xml"),
    SourceConfig(name="eli.thegreenplace.net", url="https://eli.thegreenplace.net/feeds/all.atom.xml"),
    SourceConfig(name="abortretry.fail", url="https://www.abortretry.fail/feed"),
    SourceConfig(name="fabiensanglard.net", url="https://fabiensanglard.net/rss.xml"),
    SourceConfig(name="oldvcr.blogspot.com", url="https://oldvcr.blogspot.com/feeds/posts/default"),
    SourceConfig(name="bogdanthegeek.github.io", url="https://bogdanthegeek.github.io/blog/index.xml"),
    SourceConfig(name="hugotunius.se", url="https://hugotunius.se/feed.xml"),
    SourceConfig(name="gwern.substack.com", url="https://gwern.substack.com/feed"),
    SourceConfig(name="berthub.eu", url="https://berthub.eu/articles/index.xml"),
    SourceConfig(name="chadnauseam.com", url="https://chadnauseam.com/rss.xml"),
    SourceConfig(name="simone.org", url="https://simone.org/feed/"),
    SourceConfig(name="it-notes.dragas.net", url="https://it-notes.dragas.net/feed/"),
    SourceConfig(name="beej.us", url="https://beej.us/blog/rss.xml"),
    SourceConfig(name="hey.paris", url="https://hey.paris/index.xml"),
    SourceConfig(name="danielwirtz.com", url="https://danielwirtz.com/rss.xml"),
    SourceConfig(name="matduggan.com", url="https://matduggan.com/rss/"),
    SourceConfig(name="refactoringenglish.com", url="https://refactoringenglish.com/index.xml"),
    SourceConfig(name="worksonmymachine.substack.com", url="https://worksonmymachine.substack.com/feed"),
    SourceConfig(name="philiplaine.com", url="https://philiplaine.com/index.xml"),
    SourceConfig(name="steveblank.com", url="https://steveblank.com/feed/"),
    SourceConfig(name="bernsteinbear.com", url="https://bernsteinbear.com/feed.xml"),
    SourceConfig(name="danieldelaney.net", url="https://danieldelaney.net/feed"),
    SourceConfig(name="troyhunt.com", url="https://www.troyhunt.com/rss/"),
    SourceConfig(name="herman.bearblog.dev", url="https://herman.bearblog.dev/feed/"),
    SourceConfig(name="tomrenner.com", url="https://tomrenner.com/index.xml"),
    SourceConfig(name="blog.pixelmelt.dev", url="https://blog.pixelmelt.dev/rss.xml"),
    SourceConfig(name="martinalderson.com", url="https://martinalderson.com/feed.xml"),
    SourceConfig(name="danielchasehooper.com", url="https://danielchasehooper.com/feed.xml"),
    SourceConfig(name="chiark.greenend.org.uk/~sgtatham", url="https://www.chiark.greenend.org.uk/~sgtatham/quasiblog/feed.xml"),
    SourceConfig(name="grantslatton.com", url="https://grantslatton.com/rss.xml"),
    SourceConfig(name="experimental-history.com", url="https://www.experimental-history.com/feed"),
    SourceConfig(name="anildash.com", url="https://anildash.com/feed.xml"),
    SourceConfig(name="aresluna.org", url="https://aresluna.org/main.rss"),
    SourceConfig(name="michael.stapelberg.ch", url="https://michael.stapelberg.ch/feed.xml"),
    SourceConfig(name="miguelgrinberg.com", url="https://blog.miguelgrinberg.com/feed"),
    SourceConfig(name="keygen.sh", url="https://keygen.sh/blog/feed.xml"),
    SourceConfig(name="mjg59.dreamwidth.org", url="https://mjg59.dreamwidth.org/data/rss"),
    SourceConfig(name="computer.rip", url="https://computer.rip/rss.xml"),
    SourceConfig(name="tedunangst.com", url="https://www.tedunangst.com/flak/rss"),
)
