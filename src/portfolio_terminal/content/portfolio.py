"""Bundled portfolio content, one function per terminal command."""

from __future__ import annotations


def help() -> str:  # noqa: A001
    return """
Available commands:
- commands: Displays this help message.
- about: Learn about my bio and interests.
- projects: Lists my projects.
- contact: Displays my contact information.
- clear: Clears terminal output.
"""


def about() -> str:
    return """
Hello! My name is Aden and I'm a current Mechatronics Engineering student at RMIT. I am passionate about technology and its applications in the real world. I have a strong interest in robotics, automation, and programming.

I enjoy working on projects that challenge my skills and allow me to learn new technologies. In my free time, I like to explore new programming languages and frameworks, as well as contribute to open-source projects.

I have experience in various programming languages including Python, JavaScript, and C++. I am also familiar with web development technologies such as HTML, CSS, and React.

I am particularly interested in the intersection of robotics and artificial intelligence, and I am currently seeking internships and co-op opportunities. If you are interested in collaborating, please feel free to reach out!
"""


def projects() -> str:
    return """
1. Terminal Portfolio: A portfolio presented in a unique and fun terminal interface.
   Technologies: Python, HTML, CSS
   Link: [Project One Link]

2. R.I.L.E.Y.: A personal Artificial Intelligence assistant that works on iOS, Android and Web, built on APIs from OpenAI and Google.
   It remembers what you tell it and helps with reminders, information and questions. It is a work in progress.
   Technologies: Python, JavaScript, HTML, CSS, PostgreSQL, OpenAI API, Google API
   Link: [Project Two Link]

3. Project Three: A data visualization tool for analyzing data.
   Technologies: D3.js, Python
   Link: [Project Three Link]
"""


def contact() -> str:
    return """
You can reach me at:
Email: abatemanbrowning@gmail.com
LinkedIn: [https://www.linkedin.com/in/aden-bateman-browning/]
GitHub: [https://github.com/adenbro]
"""


def clear() -> str:
    return ""
