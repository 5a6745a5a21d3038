SAMPLE_TEXT = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Proin orci lorem, lacinia sed "
    "finibus id, fermentum non nisi. Aenean ullamcorper, lacus eget porttitor finibus, diam nibh "
    "porttitor metus, sed dapibus nisi risus sed nunc. Nam congue dui dolor, vel fringilla felis "
    "euismod ut. Cras interdum diam non ornare accumsan. Fusce porta lacus magna, fringilla "
    "feugiat turpis lacinia at. Donec leo dui, vulputate vitae magna vitae, consequat commodo "
    "odio. Nulla fringilla nisi ligula, sit amet rhoncus magna venenatis non.\n"
    "Nulla odio ante, accumsan non ultrices non, pulvinar ac enim. Donec maximus sollicitudin "
    "commodo. Duis accumsan, tortor a rhoncus consequat, odio ligula pretium metus, dignissim "
    "mollis felis nisi sit amet nulla. Phasellus id dignissim erat. Nullam sed lectus aliquet, "
    "commodo lacus ac, laoreet sem. Nulla finibus sem at quam lobortis pulvinar.\n"
)
