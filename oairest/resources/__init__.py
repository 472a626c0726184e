from .assistants import Assistants
from .audio import Audio
from .batches import Batches
from .chat import Chat
from .completions import Completions
from .embeddings import Embeddings
from .files import Files
from .fine_tuning import FineTuning
from .images import Images
from .messages import Messages
from .models import Models
from .moderations import Moderations
from .runs import Runs
from .threads import Threads
from .uploads import Uploads
