import sys
import os

# Add your project directory to the sys.path
project_home = '/home/YOUR_USERNAME/jpc-theme'
if project_home not in sys.path:
    sys.path.insert(0, project_home)

# Set the working directory
os.chdir(project_home)

# Import the theme app
from app import app as application
